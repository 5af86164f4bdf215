"""Allow running with: python -m simulation"""
from simulation.cli import main

raise SystemExit(main())
