"""Runner wrappers for the command line."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from ad_risk_engine.config.settings import AppConfig, load_config
from ad_risk_engine.core.errors import AdRiskError
from ad_risk_engine.domain.ad.parse import parse_ad_payload
from ad_risk_engine.orchestrator.service import create_analyzer
from ad_risk_engine.tools.text.analyzer import analyze_text, calculate_overall_risk


def _read_payload(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def run_once(raw_ad: str, config: AppConfig | None = None) -> str:
    analyzer = create_analyzer(config)
    assessment = analyzer.analyze_ad_sync(parse_ad_payload(raw_ad))
    return json.dumps(assessment.to_payload(), ensure_ascii=True)


def run_text(text: str) -> str:
    features = analyze_text(text)
    result = features.to_dict()
    result["overall_risk"] = calculate_overall_risk(features)
    return json.dumps(result, ensure_ascii=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ad-risk-engine")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--ad", help="Path to an ad JSON payload, or '-' to read stdin.")
    source.add_argument("--text", help="Run the text analyzer on a single free-text input.")
    parser.add_argument("--corpus-dir", help="Directory holding the rule documents.")
    parser.add_argument("--config", help="Path to a YAML config file.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config, _ = load_config(args.config)
        if args.corpus_dir:
            config = config.model_copy(update={"corpus_dir": args.corpus_dir})
        logging.basicConfig(
            level=config.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        if args.text is not None:
            print(run_text(args.text))
            return 0
        print(run_once(_read_payload(args.ad), config=config))
    except AdRiskError as exc:
        print(f"analysis unavailable: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"invalid ad payload: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"cannot read ad payload: {exc}", file=sys.stderr)
        return 3
    return 0
