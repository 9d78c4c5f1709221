"""
Error types raised inside delivery channels.

Channels raise these while delivering; DeliveryChannel.send() turns them into a
failed DeliveryOutcome so the controller only ever sees the normalized shape.
Validation problems are not exceptions - see formgate.core.validation.
"""

from formgate.core import messages


class GatewayError(Exception):
    """Base class for submission gateway errors"""


class ChannelError(GatewayError):
    """
    Network or provider failure while delivering a submission.

    Args:
        detail: Diagnostic description (logged, never shown to the visitor)
        user_message: Text that is safe to show in the UI
    """

    def __init__(self, detail: str, user_message: str = messages.GENERIC_ERROR):
        super().__init__(detail)
        self.detail = detail
        self.user_message = user_message


class ConfigurationError(ChannelError):
    """Relay credentials or template ids are missing"""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            f"Relay configuration missing: {', '.join(self.missing)}",
            user_message=messages.CONFIGURATION_ERROR,
        )
