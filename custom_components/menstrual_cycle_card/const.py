"""Constants for menstrual_cycle_card."""

from logging import Logger, getLogger

LOGGER: Logger = getLogger(__package__)

DOMAIN = "menstrual_cycle_card"
ATTRIBUTION = "Derived from menstrual cycle tracker entities"

# The tracker integration whose entities and services the card consumes
TRACKER_DOMAIN = "menstrual_cycle_tracker"
SERVICE_LOG_PERIOD_START = "log_period_start"
SERVICE_LOG_PERIOD_END = "log_period_end"
ATTR_TRACKER = "tracker"

CONF_ENTITY = "entity"
CONF_TITLE = "title"
CONF_SHOW_CYCLE_BAR = "show_cycle_bar"
CONF_SHOW_NEXT_PERIOD = "show_next_period"
CONF_SHOW_FERTILE_WINDOW = "show_fertile_window"
CONF_SHOW_PMS_WINDOW = "show_pms_window"
CONF_SHOW_LAST_PERIOD = "show_last_period"
CONF_SHOW_STATS = "show_stats"
CONF_SHOW_SYMPTOMS = "show_symptoms"
CONF_SHOW_LOG_BUTTONS = "show_log_buttons"

SECTION_DEFAULTS: dict[str, bool] = {
    CONF_SHOW_CYCLE_BAR: True,
    CONF_SHOW_NEXT_PERIOD: True,
    CONF_SHOW_FERTILE_WINDOW: True,
    CONF_SHOW_PMS_WINDOW: True,
    CONF_SHOW_LAST_PERIOD: False,
    CONF_SHOW_STATS: True,
    CONF_SHOW_SYMPTOMS: True,
    CONF_SHOW_LOG_BUTTONS: True,
}

DEFAULT_TITLE = "Cycle Tracker"
DEFAULT_CYCLE_LENGTH = 28
DEFAULT_PERIOD_LENGTH = 5
LUTEAL_PHASE_DAYS = 14

# Seconds the log button stays confirmed (and locked) after a successful call
LOG_COOLDOWN_SECONDS = 2.5

# Attributes published by the tracker entities
ATTR_DAYS_UNTIL_NEXT_PERIOD = "days_until_next_period"
ATTR_DAYS_OVERDUE = "days_overdue"
ATTR_DAYS_ACTIVE = "days_active"
ATTR_DAYS_LEFT_OF_PERIOD = "days_left_of_period"
ATTR_DAYS_PERIOD_END_OVERDUE = "days_period_end_overdue"
ATTR_LAST_PERIOD_START = "last_period_start"
ATTR_LAST_PERIOD_END = "last_period_end"
ATTR_IS_PMS_WINDOW = "is_pms_window"
ATTR_SYMPTOMS = "symptoms"
