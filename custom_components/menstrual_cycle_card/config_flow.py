"""Config flow for the cycle card."""

from __future__ import annotations

from typing import Any

import voluptuous as vol
from homeassistant import config_entries
from homeassistant.core import callback
from homeassistant.helpers import selector

from .const import (
    CONF_ENTITY,
    CONF_TITLE,
    DOMAIN,
    SECTION_DEFAULTS,
    TRACKER_DOMAIN,
)
from .entities import derive_entities


def card_options(user_input: dict[str, Any]) -> dict[str, Any]:
    """Return the stored options for a card.

    The title is always written, as an empty string when cleared, so it
    takes precedence over anything stored in the entry data.
    """
    options: dict[str, Any] = {
        key: bool(user_input.get(key, default))
        for key, default in SECTION_DEFAULTS.items()
    }
    options[CONF_TITLE] = (user_input.get(CONF_TITLE) or "").strip()
    return options


class CycleCardFlowHandler(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for the integration."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> config_entries.ConfigFlowResult:
        """Handle the initial step."""
        errors: dict[str, str] = {}
        if user_input is not None:
            try:
                entities = derive_entities(user_input.get(CONF_ENTITY, ""))
            except ValueError:
                errors[CONF_ENTITY] = "invalid_entity"
            else:
                await self.async_set_unique_id(entities.period_active)
                self._abort_if_unique_id_configured()
                options = card_options(user_input)
                return self.async_create_entry(
                    title=options[CONF_TITLE] or entities.period_active,
                    data={CONF_ENTITY: entities.period_active},
                    options=options,
                )

        return self.async_show_form(
            step_id="user",
            data_schema=vol.Schema(
                {
                    vol.Required(CONF_ENTITY): selector.EntitySelector(
                        selector.EntitySelectorConfig(
                            domain="binary_sensor", integration=TRACKER_DOMAIN
                        )
                    ),
                    vol.Optional(CONF_TITLE): selector.TextSelector(),
                }
            ),
            errors=errors,
        )

    async def async_step_import(
        self, config: dict[str, Any]
    ) -> config_entries.ConfigFlowResult:
        """Handle import from YAML."""
        return await self.async_step_user(config)

    @staticmethod
    @callback
    def async_get_options_flow(
        config_entry: config_entries.ConfigEntry,
    ) -> config_entries.OptionsFlow:
        return CycleCardOptionsFlowHandler()


class CycleCardOptionsFlowHandler(config_entries.OptionsFlow):
    """Toggle the card sections."""

    async def async_step_init(
        self, user_input: dict[str, Any] | None = None
    ) -> config_entries.ConfigFlowResult:
        if user_input is not None:
            return self.async_create_entry(title="", data=card_options(user_input))

        current = self.config_entry.options
        title = current.get(CONF_TITLE) or None
        schema: dict[Any, Any] = {
            vol.Optional(
                CONF_TITLE, description={"suggested_value": title}
            ): selector.TextSelector(),
        }
        for key, default in SECTION_DEFAULTS.items():
            schema[
                vol.Optional(key, default=bool(current.get(key, default)))
            ] = selector.BooleanSelector()
        return self.async_show_form(step_id="init", data_schema=vol.Schema(schema))
