"""
Diagnosa — Command-line interface

Usage:
    python -m diagnosa diagnose demam batuk sesak-napas
    python -m diagnosa diagnose mual muntah pusing --json
    python -m diagnosa symptoms
    python -m diagnosa diseases
    python -m diagnosa serve --port 8080
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import load_config, get_default_config
from .inference import NaiveBayesEngine


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diagnosa",
        description="Naive Bayes disease diagnosis calculator"
    )
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--kb", help="Knowledge base file (YAML/JSON)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p_diag = sub.add_parser("diagnose", help="Rank diseases for the given symptoms")
    p_diag.add_argument("symptoms", nargs="*", help="Symptom ids")
    p_diag.add_argument("--json", action="store_true", help="JSON output")

    sub.add_parser("symptoms", help="List the symptom vocabulary")
    sub.add_parser("diseases", help="List the disease registry")

    p_serve = sub.add_parser("serve", help="Run the REST API")
    p_serve.add_argument("--host", default="0.0.0.0", help="Host (default: 0.0.0.0)")
    p_serve.add_argument("--port", type=int, default=8000, help="Port (default: 8000)")
    p_serve.add_argument("--reload", action="store_true", help="Enable auto-reload")

    return parser


def _build_engine(args) -> NaiveBayesEngine:
    config = load_config(args.config) if args.config else get_default_config()
    if args.kb:
        config.knowledge_base_path = args.kb
    return NaiveBayesEngine.from_config(config)


def _cmd_diagnose(engine: NaiveBayesEngine, args) -> int:
    if not args.symptoms:
        print("No symptoms given; nothing to diagnose.")
        return 0

    report = engine.diagnose_report(args.symptoms)

    if args.json:
        print(report.model_dump_json(indent=2))
        return 0

    if report.ignored_symptoms:
        print(f"Ignored unknown symptoms: {', '.join(report.ignored_symptoms)}")

    print(f"Symptoms: {', '.join(report.evidence) or '(none known)'} "
          f"[{report.symptom_coverage:.0%} of vocabulary]")
    print("-" * 60)
    for rank, result in enumerate(report.results, start=1):
        print(f"{rank}. {result.name:<24} {result.probability_percent:6.2f}%  {result.confidence.value}")
    return 0


def _cmd_symptoms(engine: NaiveBayesEngine) -> int:
    frequencies = engine.disease_encoder.get_symptom_frequencies()
    for symptom in engine.knowledge_base.list_symptoms():
        print(f"{symptom.id:<28} {symptom.label:<36} {frequencies[symptom.id]} diseases")
    return 0


def _cmd_diseases(engine: NaiveBayesEngine) -> int:
    for disease in engine.knowledge_base.list_diseases():
        print(f"{disease.id:<12} {disease.name:<24} prior={disease.prior:.2f}  "
              f"{', '.join(disease.symptoms)}")
    return 0


def _cmd_serve(args) -> int:
    import uvicorn

    uvicorn.run(
        "diagnosa.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "serve":
        # Read by diagnosa.api.config when uvicorn imports the app
        if args.kb:
            os.environ["DIAGNOSA_KB_PATH"] = args.kb
        if args.config:
            os.environ["DIAGNOSA_CONFIG"] = args.config
        return _cmd_serve(args)

    try:
        engine = _build_engine(args)
    except (FileNotFoundError, ValueError) as e:
        logging.error("Cannot build engine: %s", e)
        return 1

    if args.command == "diagnose":
        return _cmd_diagnose(engine, args)
    elif args.command == "symptoms":
        return _cmd_symptoms(engine)
    else:
        return _cmd_diseases(engine)


if __name__ == "__main__":
    sys.exit(main())
