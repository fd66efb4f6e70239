"""Commands - Write operations that change state.

Commands represent caller intent. They are immutable dataclasses with
imperative names (CreateDog, ChangeUserRole); each has a handler under
``handlers/``.
"""
