"""
Chatbot component - command, emoji, phone, URL and greeting helpers.
"""

from ._impl import (
    ChatbotConfig,
    check_phone_number,
    get_url,
    is_phone_number,
    is_valid_command,
    nice_to_meet_you,
    phone_response,
    remove_emoji,
    rewrite_name,
)
from .component import (
    run,
    run_command,
    run_greeting,
    run_phone,
    run_remove_emoji,
    run_urls,
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

__all__ = [
    # Entry points
    "run",
    "run_command",
    "run_greeting",
    "run_phone",
    "run_remove_emoji",
    "run_urls",
    # Input models
    "CommandInput",
    "GreetingInput",
    "MessageInput",
    "PhoneInput",
    "UrlInput",
    # Output models
    "CommandOutput",
    "GreetingOutput",
    "MessageOutput",
    "PhoneOutput",
    "UrlOutput",
    # Ports
    "RulesPort",
    # Core
    "ChatbotConfig",
    "check_phone_number",
    "get_url",
    "is_phone_number",
    "is_valid_command",
    "nice_to_meet_you",
    "phone_response",
    "remove_emoji",
    "rewrite_name",
]
