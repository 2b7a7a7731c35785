"""Exit codes for gitsemver commands.

- 0: Success
- 1: Repository could not be opened or read
- 2: Configuration error (no branch, missing value, ambiguous branch)
"""

EXIT_SUCCESS: int = 0
EXIT_REPOSITORY_ERROR: int = 1
EXIT_CONFIG_ERROR: int = 2
