"""
CLI entry point for order notifications.

Prints the message that would be sent; delivery is left to the service.

Usage:
    python -m bakehouse.notify --orders orders.json --kind unpaid
    python -m bakehouse.notify --orders orders.json --kind delivery --date 2024-03-15
    python -m bakehouse.notify --kind custom --message "Tiệm nghỉ Chủ nhật"
"""

import argparse
import json
import sys
from datetime import date, datetime
from pathlib import Path

from ..dates import REPORT_TZ
from .adapters import order_from_document
from .models import NotificationReportRequest, ReportKind
from .report import compile_report


def _load_orders(path: Path) -> list:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("orders", [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of orders in {path}")
    return [order_from_document(doc) for doc in data if isinstance(doc, dict)]


def main():
    parser = argparse.ArgumentParser(
        prog="notify",
        description="Order notifications - render unpaid, pending and delivery-due reports",
    )

    parser.add_argument(
        "--kind",
        required=True,
        choices=[k.value for k in ReportKind],
        help="Report kind",
    )

    parser.add_argument(
        "--orders",
        metavar="FILE",
        help="JSON export of the order collection",
    )

    parser.add_argument(
        "--date",
        metavar="YYYY-MM-DD",
        help="Delivery date for delivery reports (default: today in shop time)",
    )

    parser.add_argument(
        "--message",
        default="",
        help="Message text for custom notifications",
    )

    args = parser.parse_args()
    kind = ReportKind(args.kind)

    if kind == ReportKind.CUSTOM and not args.message.strip():
        print("Error: --message is required for custom notifications", file=sys.stderr)
        sys.exit(1)

    orders = []
    if kind != ReportKind.CUSTOM:
        if not args.orders:
            print("Error: --orders is required for this report", file=sys.stderr)
            sys.exit(1)
        orders_path = Path(args.orders)
        if not orders_path.exists():
            print(f"Error: Order file not found: {orders_path}", file=sys.stderr)
            sys.exit(1)

    try:
        if kind != ReportKind.CUSTOM:
            orders = _load_orders(orders_path)

        target_date = None
        if kind == ReportKind.DELIVERY_DUE:
            target_date = date.fromisoformat(args.date) if args.date else datetime.now(REPORT_TZ).date()

        request = NotificationReportRequest(
            kind=kind,
            orders=orders,
            target_date=target_date,
            content=args.message,
        )
        print(compile_report(request))

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
