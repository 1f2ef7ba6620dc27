"""
Print the PrintDesk dashboard in a terminal

Loads orders, colours and filaments through the REST API and prints the order
table, remaining filament per colour and orders per week.

Usage:
    python backend/scripts/show_dashboard.py --status Printing --sort price --direction asc
    python backend/scripts/show_dashboard.py --api-url http://192.168.1.88:5001/api --unpaid
"""
import argparse
import sys
from pathlib import Path

# Add backend directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from printdesk.core.settings import get_settings
from printdesk.logging_config import setup_logging
from printdesk.schemas.dashboard import FilterState, SortDirection, SortKey, SortState
from printdesk.services.dashboard_state import DashboardState
from printdesk.services.gateway import GatewayConfig, RemoteDataGateway


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Show the PrintDesk dashboard")
    parser.add_argument("--api-url", help="REST service base URL (default: API_URL setting)")
    parser.add_argument("--status", help="Only orders with this status")
    paid = parser.add_mutually_exclusive_group()
    paid.add_argument("--paid", dest="payment_received", action="store_true", default=None)
    paid.add_argument("--unpaid", dest="payment_received", action="store_false")
    parser.add_argument("--sort", choices=[key.value for key in SortKey], default=SortKey.DATE_OF_ORDER.value)
    parser.add_argument("--direction", choices=[d.value for d in SortDirection], default=SortDirection.DESC.value)
    return parser.parse_args(argv)


def format_size(order) -> str:
    return "x".join(f"{side or 0:g}" for side in order.dimensions)


def print_orders(state: DashboardState) -> None:
    print(f"\n{'Date':<12}{'Nickname':<18}{'Size':<12}{'Color':<10}{'Price':>9}  {'Status':<10}{'Paid':<5}")
    print("-" * 78)
    for order in state.rows():
        day = order.date_of_order.strftime("%d-%m-%Y") if order.date_of_order else ""
        paid = "yes" if order.payment_received else "no"
        print(f"{day:<12}{(order.nickname or ''):<18}{format_size(order):<12}{(order.color or ''):<10}{order.price:>9.2f}  {(order.status or ''):<10}{paid:<5}")


def print_filament(state: DashboardState) -> None:
    print("\nRemaining filament")
    for row in state.filament_remaining():
        print(f"  {row.label:<28}{row.remaining:>8g}")


def print_weeks(state: DashboardState) -> None:
    print("\nOrders per week")
    for week in state.orders_per_week():
        print(f"  {week.week_label:<8}{'#' * week.count} {week.count}")


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging()

    config = GatewayConfig.from_settings(settings)
    if args.api_url:
        config = config.model_copy(update={"base_url": args.api_url})

    with RemoteDataGateway(config) as gateway:
        state = DashboardState(gateway, settings.COLOR_OPTIONS)
        state.filter_state = FilterState(status=args.status, payment_received=args.payment_received)
        state.sort_state = SortState(sort_key=args.sort, direction=args.direction)

        if not state.refresh_all() and not state.is_loaded("orders"):
            print("Could not load orders from the REST service", file=sys.stderr)
            return 1

        print_orders(state)
        print_filament(state)
        print_weeks(state)
    return 0


if __name__ == "__main__":
    sys.exit(main())
