# Visitor-facing copy used by the gateway

GENERIC_ERROR = "Something went wrong. Please try again."
NETWORK_ERROR = "Network error. Please check your connection and try again."
CONFIGURATION_ERROR = "Email service configuration error. Please contact support."

LEAD_CONFIRMATION = "Thank you! We'll email you the download link shortly."
LEAD_FOLLOW_UP = "Your download is starting. We'll follow up by email shortly."
CONTACT_CONFIRMATION = "Thank you for your message! We'll get back to you within 24 hours."

TOAST_SUCCESS_TITLE = "Success!"
TOAST_RECEIVED_TITLE = "Request received"
TOAST_MESSAGE_SENT_TITLE = "Message Sent!"
TOAST_ERROR_TITLE = "Error"

# Field rule messages shown next to the inputs
INVALID_EMAIL = "Invalid email address"
ORGANIZATION_REQUIRED = "Organization is required"
MESSAGE_TOO_SHORT = "Message must be at least 10 characters"
CONSENT_REQUIRED = "You must consent to proceed"
