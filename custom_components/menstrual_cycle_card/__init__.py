"""Setup for the menstrual cycle card integration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import voluptuous as vol
from homeassistant import config_entries
from homeassistant.const import Platform
from homeassistant.exceptions import ConfigEntryError
from homeassistant.helpers import config_validation as cv
from homeassistant.loader import async_get_loaded_integration

from .const import CONF_ENTITY, CONF_TITLE, DOMAIN, LOGGER, SECTION_DEFAULTS
from .coordinator import CycleCardUpdateCoordinator
from .data import CycleCardConfigEntry, CycleCardData
from .entities import derive_entities

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.typing import ConfigType

PLATFORMS: list[Platform] = [
    Platform.SENSOR,
    Platform.BUTTON,
]

CARD_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_ENTITY): cv.entity_id,
        vol.Optional(CONF_TITLE): cv.string,
        **{
            vol.Optional(key, default=default): cv.boolean
            for key, default in SECTION_DEFAULTS.items()
        },
    }
)

CONFIG_SCHEMA = vol.Schema(
    {DOMAIN: vol.All(cv.ensure_list, [CARD_SCHEMA])},
    extra=vol.ALLOW_EXTRA,
)


async def async_setup(hass: HomeAssistant, config: ConfigType) -> bool:
    """Set up cards declared in YAML configuration."""
    if DOMAIN not in config:
        return True
    for card in config[DOMAIN]:
        hass.async_create_task(
            hass.config_entries.flow.async_init(
                DOMAIN,
                context={"source": config_entries.SOURCE_IMPORT},
                data=dict(card),
            )
        )
    return True


async def async_setup_entry(hass: HomeAssistant, entry: CycleCardConfigEntry) -> bool:
    """Set up a cycle card from a config entry."""
    try:
        entities = derive_entities(entry.data.get(CONF_ENTITY, ""))
    except ValueError as err:
        raise ConfigEntryError(str(err)) from err

    coordinator = CycleCardUpdateCoordinator(
        hass,
        config_entry=entry,
        entities=entities,
        options={**entry.data, **entry.options},
    )
    entry.runtime_data = CycleCardData(
        coordinator=coordinator,
        integration=async_get_loaded_integration(hass, entry.domain),
    )
    await coordinator.async_config_entry_first_refresh()
    entry.async_on_unload(coordinator.async_start_tracking())
    entry.async_on_unload(coordinator.submitter.async_shutdown)
    LOGGER.debug("Tracking %s for %s", entities.all_ids, entry.title)

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    entry.async_on_unload(entry.add_update_listener(async_reload_entry))
    return True


async def async_unload_entry(hass: HomeAssistant, entry: CycleCardConfigEntry) -> bool:
    """Unload a config entry."""
    return await hass.config_entries.async_unload_platforms(entry, PLATFORMS)


async def async_reload_entry(hass: HomeAssistant, entry: CycleCardConfigEntry) -> None:
    """Reload when config entry options change."""
    await hass.config_entries.async_reload(entry.entry_id)
