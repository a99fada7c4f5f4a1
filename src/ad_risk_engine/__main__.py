"""CLI entrypoint for ad_risk_engine."""

from __future__ import annotations

from ad_risk_engine.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
