"""
Chatbot component - text helpers for a toy chatbot.

Every entry point is total: any string input produces an output.

Invariants:
- I1: Commands are matched on prefix only, ignoring case
- I2: Text outside emoji placeholders is preserved verbatim
- I3: Rejected phone responses echo the input verbatim
- I4: Only the first "Surname, Given" pair is rewritten
"""

from __future__ import annotations

import logging

from ._impl import (
    ChatbotConfig,
    get_url,
    is_valid_command,
    nice_to_meet_you,
    phone_response,
    remove_emoji,
)
from .models import (
    CommandInput,
    CommandOutput,
    GreetingInput,
    GreetingOutput,
    MessageInput,
    MessageOutput,
    PhoneInput,
    PhoneOutput,
    UrlInput,
    UrlOutput,
)
from .ports import RulesPort

logger = logging.getLogger(__name__)

ChatbotInput = CommandInput | MessageInput | PhoneInput | UrlInput | GreetingInput


def _build_config(rules: RulesPort | None) -> ChatbotConfig:
    """Build chatbot config from rules port."""
    if rules is None:
        return ChatbotConfig()

    return ChatbotConfig(
        command_prefix=rules.get_command_prefix(),
        phone_accepted=rules.get_phone_accepted(),
        phone_rejected=rules.get_phone_rejected(),
        greeting=rules.get_greeting(),
    )


# --- Component Entry Points ---


def run_command(inp: CommandInput, *, rules: RulesPort | None = None) -> CommandOutput:
    """Check whether a command is addressed to the chatbot."""
    config = _build_config(rules)
    valid = is_valid_command(inp.command, config.command_prefix)
    if not valid:
        logger.debug(f"Ignoring command without prefix {config.command_prefix!r}")
    return CommandOutput(valid=valid)


def run_remove_emoji(
    inp: MessageInput, *, rules: RulesPort | None = None
) -> MessageOutput:
    """Strip emoji placeholders from a message."""
    return MessageOutput(message=remove_emoji(inp.message))


def run_phone(inp: PhoneInput, *, rules: RulesPort | None = None) -> PhoneOutput:
    """
    Check a phone number and build the chatbot response.

    Args:
        inp: Input containing the phone number.
        rules: Optional rules port supplying the response texts.

    Returns:
        PhoneOutput with the acceptance flag and response text.
    """
    config = _build_config(rules)
    accepted, response = phone_response(
        inp.number,
        accepted=config.phone_accepted,
        rejected=config.phone_rejected,
    )
    if not accepted:
        logger.info("Phone number rejected")
    return PhoneOutput(accepted=accepted, response=response)


def run_urls(inp: UrlInput, *, rules: RulesPort | None = None) -> UrlOutput:
    """Extract URLs from a user reply."""
    urls = get_url(inp.user_input)
    return UrlOutput(urls=tuple(urls) if urls is not None else None)


def run_greeting(
    inp: GreetingInput, *, rules: RulesPort | None = None
) -> GreetingOutput:
    """Greet the user by name."""
    config = _build_config(rules)
    return GreetingOutput(greeting=nice_to_meet_you(inp.full_name, config.greeting))


def run(
    inp: ChatbotInput,
    *,
    rules: RulesPort | None = None,
) -> CommandOutput | MessageOutput | PhoneOutput | UrlOutput | GreetingOutput:
    """
    Main entry point for the chatbot component.

    Dispatches to the appropriate handler based on input type.
    """
    if isinstance(inp, CommandInput):
        return run_command(inp, rules=rules)
    elif isinstance(inp, MessageInput):
        return run_remove_emoji(inp, rules=rules)
    elif isinstance(inp, PhoneInput):
        return run_phone(inp, rules=rules)
    elif isinstance(inp, UrlInput):
        return run_urls(inp, rules=rules)
    elif isinstance(inp, GreetingInput):
        return run_greeting(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
