"""Permite ``python -m flora_services <analytics|notification>``."""

from flora_services.cli import main

raise SystemExit(main())
