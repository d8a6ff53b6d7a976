"""``python -m croncat_cli <contract-address>``: query get_tasks using the ambient config."""

import sys

from croncat_cli.core.dispatcher import run

if __name__ == "__main__":
    raise SystemExit(run(sys.argv[1:]))
