"""Core trigger-evaluation utilities.

Responsibilities:
  - Provide the evaluator, option, result and error types for running
    declared transitions against a stateful subject.
  - Must not clone the subject; only its state field is written.
"""
