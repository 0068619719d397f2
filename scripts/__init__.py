"""
Command-line scripts.

Scripts:
    - cli.py: Decode shortcodes into parameters or longcode tokens (JSON)
"""
