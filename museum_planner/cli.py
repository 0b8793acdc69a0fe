"""museum-planner command line: run the engine over a JSON request file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from museum_planner.domain.exceptions import DomainError
from museum_planner.domain.models import PlanRequest
from museum_planner.domain.pricing.rules import parse_knowledge_base
from museum_planner.services.contracts import DiscountRequest, PriceRequest
from museum_planner.services.plan_service import discounts_for_venue, execute_plan, price_venue

_COMMANDS = {
    "plan": (PlanRequest, execute_plan),
    "price": (PriceRequest, price_venue),
    "discounts": (DiscountRequest, discounts_for_venue),
}


def _load_request(path: Path, command: str, *, sunday_zero_weekdays: bool) -> BaseModel:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if "ticket_rules" in payload:
        # Validate rules through the factory so weekday conversion applies.
        payload["ticket_rules"] = parse_knowledge_base(
            payload["ticket_rules"], sunday_zero_weekdays=sunday_zero_weekdays
        )
    model, _ = _COMMANDS[command]
    return model.model_validate(payload)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="museum-planner", description="Museum ticket pricing and visit planning")
    parser.add_argument("command", choices=sorted(_COMMANDS), help="operation to run")
    parser.add_argument("request", type=Path, help="JSON request file")
    parser.add_argument(
        "--sunday-zero-weekdays",
        action="store_true",
        help="ticket rule dayOfWeek lists use 0=Sunday instead of ISO weekdays",
    )
    parser.add_argument("--indent", type=int, default=2)
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)
    try:
        request = _load_request(args.request, args.command, sunday_zero_weekdays=args.sunday_zero_weekdays)
        _, handler = _COMMANDS[args.command]
        result = handler(request)
    except (OSError, json.JSONDecodeError, ValidationError, DomainError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
