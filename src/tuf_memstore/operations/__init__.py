"""
Operations package - service layer between the CLI and the store.

Keeps CLI commands thin: loading metadata into a store, mapping errors to
exit codes and formatting output live here.
"""
from .loader import load_directory, role_name_for
from .mappers import exit_code_for, run_and_exit

__all__ = ["load_directory", "role_name_for", "exit_code_for", "run_and_exit"]
