"""Device endpoints and the user-facing strings shown by the configure screen."""

DEFAULT_DEVICE_HOST = "spot-check.local."
DEFAULT_DEVICE_PORT = 80

CURRENT_CONFIGURATION_PATH = "current_configuration"
CONFIGURE_PATH = "configure"
JSON_CONTENT_TYPE = "application/json"

ERROR_TITLE = "Error"
SUCCESS_TITLE = "Success"

FETCH_ERROR_MESSAGE = (
    "Could not retrieve current Spot Check configuration saved on device, "
    "functionality to save new configuration might be broken."
)
APPLY_ERROR_MESSAGE = (
    "Could not find Spot Check device on network, "
    "are you sure it is turned on and connected?"
)
APPLY_SUCCESS_MESSAGE = "Successfully applied new configuration to Spot Check device"
FORM_INCOMPLETE_MESSAGE = (
    "Spot name, number of days and at least one forecast type are required."
)
