"""Functional tests.

Purpose
- Walk through what a newcomer does with the ``solid`` CLI: ask for help,
  read about the principles, then run the illustrations.

Guidelines
- Treat the CLI as a black box; assert only on what the user sees.
- One flow per test class; narrate each step in comments.
"""
