import argparse
import logging
import sys
from pathlib import Path

from appointbot.adapters.clock import SystemClock
from appointbot.adapters.rules_ports import AppointmentRulesAdapter, ChatbotRulesAdapter
from appointbot.components import appointment, chatbot
from appointbot.rules.loader import load_rules, load_rules_or_default

logger = logging.getLogger("cli")


def _fail(errors: list[appointment.AppointmentValidationError]) -> int:
    for error in errors:
        logger.error(f"{error.code}: {error.message}")
    return 1


def handle_create(args: argparse.Namespace, rules: AppointmentRulesAdapter) -> int:
    now = None
    if args.now:
        try:
            zone = appointment.resolve_zone(rules.get_timezone())
            now = appointment.parse_timestamp(args.now, zone)
        except appointment.AppointmentError as e:
            logger.error(str(e))
            return 1

    result = appointment.run_create(
        appointment.CreateAppointmentInput(days=args.days, now=now),
        clock=SystemClock(),
        rules=rules,
    )
    if not result.success:
        return _fail(result.errors)
    print(result.timestamp)
    return 0


def handle_details(args: argparse.Namespace, rules: AppointmentRulesAdapter) -> int:
    result = appointment.run_details(appointment.GetDetailsInput(args.timestamp), rules=rules)
    if not result.success or result.details is None:
        return _fail(result.errors)
    _print_details(result.details)
    return 0


def handle_update(args: argparse.Namespace, rules: AppointmentRulesAdapter) -> int:
    options = {
        field: getattr(args, field)
        for field in appointment.DETAIL_FIELDS
        if getattr(args, field) is not None
    }
    result = appointment.run_update(
        appointment.UpdateAppointmentInput(args.timestamp, options), rules=rules
    )
    if not result.success or result.details is None:
        return _fail(result.errors)
    _print_details(result.details)
    return 0


def handle_between(args: argparse.Namespace, rules: AppointmentRulesAdapter) -> int:
    result = appointment.run_time_between(
        appointment.TimeBetweenInput(args.timestamp_a, args.timestamp_b), rules=rules
    )
    if not result.success:
        return _fail(result.errors)
    print(result.seconds)
    return 0


def handle_valid(args: argparse.Namespace, rules: AppointmentRulesAdapter) -> int:
    result = appointment.run_is_valid(
        appointment.IsValidInput(args.appointment, args.current), rules=rules
    )
    if not result.success:
        return _fail(result.errors)
    print("valid" if result.valid else "invalid")
    return 0


def _print_details(details: appointment.AppointmentDetails) -> None:
    for key, value in details.as_dict().items():
        print(f"{key}: {value}")


def handle_chat(args: argparse.Namespace, rules: ChatbotRulesAdapter) -> int:
    if args.command == "command":
        valid = chatbot.run_command(chatbot.CommandInput(args.text), rules=rules).valid
        print("valid" if valid else "invalid")
    elif args.command == "emoji":
        print(chatbot.run_remove_emoji(chatbot.MessageInput(args.text), rules=rules).message)
    elif args.command == "phone":
        print(chatbot.run_phone(chatbot.PhoneInput(args.text), rules=rules).response)
    elif args.command == "urls":
        urls = chatbot.run_urls(chatbot.UrlInput(args.text), rules=rules).urls
        for url in urls or ():
            print(url)
    elif args.command == "greet":
        print(chatbot.run_greeting(chatbot.GreetingInput(args.text), rules=rules).greeting)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Appointment and chatbot helpers")
    parser.add_argument("--rules", help="Path to rules.yaml (default: $APPOINTBOT_RULES)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # create
    create_parser = subparsers.add_parser("create", help="Create an appointment N days out")
    create_parser.add_argument("days", type=int, help="Days from now (may be negative)")
    create_parser.add_argument("--now", help="Base timestamp instead of the current time")

    # details
    details_parser = subparsers.add_parser("details", help="Show local components")
    details_parser.add_argument("timestamp")

    # update
    update_parser = subparsers.add_parser("update", help="Override local components")
    update_parser.add_argument("timestamp")
    for field in appointment.DETAIL_FIELDS:
        update_parser.add_argument(f"--{field}", type=int)

    # between
    between_parser = subparsers.add_parser("between", help="Seconds between timestamps")
    between_parser.add_argument("timestamp_a")
    between_parser.add_argument("timestamp_b")

    # valid
    valid_parser = subparsers.add_parser("valid", help="Check appointment is in the future")
    valid_parser.add_argument("appointment")
    valid_parser.add_argument("current")

    # chatbot
    for name, help_text in [
        ("command", "Check a chatbot command"),
        ("emoji", "Remove emoji placeholders"),
        ("phone", "Check a phone number"),
        ("urls", "Extract URLs"),
        ("greet", "Greet a 'Surname, Given' name"),
    ]:
        chat_parser = subparsers.add_parser(name, help=help_text)
        chat_parser.add_argument("text")

    return parser


APPOINTMENT_HANDLERS = {
    "create": handle_create,
    "details": handle_details,
    "update": handle_update,
    "between": handle_between,
    "valid": handle_valid,
}


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)

    args = build_parser().parse_args(argv)

    try:
        rules = load_rules(Path(args.rules)) if args.rules else load_rules_or_default()
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    handler = APPOINTMENT_HANDLERS.get(args.command)
    if handler is not None:
        return handler(args, AppointmentRulesAdapter.from_rules(rules))
    return handle_chat(args, ChatbotRulesAdapter.from_rules(rules))


if __name__ == "__main__":
    sys.exit(main())
