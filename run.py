"""Run a CAS browser scenario from a source checkout."""
import sys

from cas_scenarios.cli import main

if __name__ == "__main__":
    sys.exit(main())
