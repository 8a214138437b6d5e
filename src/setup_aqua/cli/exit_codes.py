"""Exit codes for the setup-aqua CLI.

- 0: Success
- 2: An aqua command run by the action failed
- 3: Invalid usage (bad arguments, missing inputs)
- 4: Bootstrap failure (download, verification, extraction or self-update)
"""

from __future__ import annotations

EXIT_SUCCESS = 0
EXIT_COMMAND_ERROR = 2
EXIT_INVALID_USAGE = 3
EXIT_BOOTSTRAP_FAILURE = 4
