"""Allow `python -m fsdlint`."""

from fsdlint.interfaces.cli.cli_main import main

raise SystemExit(main())
