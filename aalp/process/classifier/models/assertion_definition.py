# Path: aalp/process/classifier/models/assertion_definition.py
"""
Assertion Definition Model

Pydantic models for the assertions a learner can attach to a transaction.
Definitions are loaded once from the dictionary and never mutated.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ....constants import Domain, ParameterType, PARAMETER_TYPE_ALIASES


class ParameterOption(BaseModel):
    """One choice of a dropdown parameter."""
    model_config = ConfigDict(frozen=True)

    value: str = Field(description="Stored value (e.g. 'monetary-unit')")
    label: str = Field(description="Text shown to the learner")


class ParameterSpec(BaseModel):
    """
    Schema of a single assertion parameter.

    A parameter with conditional_on only applies while every named sibling
    parameter holds the given value, e.g. asset-type only applies when
    unit = physical-unit.
    """
    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Parameter key within the assertion")
    type: ParameterType = Field(description="Input type")
    label: str = Field(description="Text shown to the learner")
    options: tuple[ParameterOption, ...] = Field(
        default=(),
        description="Allowed values (dropdown only)"
    )
    optional: bool = Field(
        default=False,
        description="Whether the learner may leave it empty"
    )
    conditional_on: Optional[Mapping[str, str]] = Field(
        default=None,
        description="Sibling parameter values this parameter depends on"
    )

    @field_validator('conditional_on')
    @classmethod
    def _freeze_conditions(cls, value: Optional[Mapping]) -> Optional[Mapping]:
        return None if value is None else MappingProxyType(dict(value))

    @field_validator('type', mode='before')
    @classmethod
    def _resolve_alias(cls, value: Any) -> Any:
        if isinstance(value, str):
            return PARAMETER_TYPE_ALIASES.get(value, value)
        return value

    @model_validator(mode='after')
    def _check_options(self) -> 'ParameterSpec':
        if self.type == ParameterType.DROPDOWN and not self.options:
            raise ValueError(f"dropdown parameter '{self.key}' has no options")
        if self.type != ParameterType.DROPDOWN and self.options:
            raise ValueError(
                f"only dropdown parameters take options ('{self.key}' is {self.type.value})"
            )
        return self

    @property
    def option_values(self) -> tuple[str, ...]:
        """Stored values of the dropdown options."""
        return tuple(option.value for option in self.options)

    def is_active(self, values: dict[str, Any]) -> bool:
        """Check whether this parameter applies given its siblings' values."""
        if not self.conditional_on:
            return True
        return all(
            values.get(sibling) == expected
            for sibling, expected in self.conditional_on.items()
        )


class AssertionDefinition(BaseModel):
    """
    Complete definition of one assertion.

    Example:
        provides = AssertionDefinition(
            code="provides",
            label="Provides",
            domain=Domain.EXCHANGE,
            level=0,
            description="The entity gives something in an exchange",
            parameters={
                "quantity": ParameterSpec(
                    key="quantity", type=ParameterType.NUMBER,
                    label="Quantity", optional=True
                )
            }
        )
    """
    model_config = ConfigDict(frozen=True)

    code: str = Field(description="Unique assertion code")
    label: str = Field(description="Human-readable name")
    domain: Domain = Field(description="Domain the assertion belongs to")
    level: int = Field(ge=0, description="Level at which it unlocks")
    description: str = Field(default='', description="What the assertion states")
    parameterized: bool = Field(
        default=False,
        description="Whether the assertion carries parameters"
    )
    parameters: Mapping[str, ParameterSpec] = Field(
        default_factory=dict,
        validate_default=True,
        description="Parameter schema keyed by parameter key (ordered)"
    )

    @model_validator(mode='before')
    @classmethod
    def _default_parameterized(cls, data: Any) -> Any:
        if isinstance(data, dict) and 'parameterized' not in data:
            data = dict(data)
            data['parameterized'] = bool(data.get('parameters'))
        return data

    @field_validator('parameters')
    @classmethod
    def _freeze_parameters(cls, value: Mapping) -> Mapping:
        return MappingProxyType(dict(value))

    @model_validator(mode='after')
    def _check_parameters(self) -> 'AssertionDefinition':
        if self.parameterized and not self.parameters:
            raise ValueError(f"assertion '{self.code}' is parameterized but has no parameters")
        for key, spec in self.parameters.items():
            if spec.key != key:
                raise ValueError(
                    f"assertion '{self.code}': parameter '{key}' declares key '{spec.key}'"
                )
            for sibling in (spec.conditional_on or {}):
                if sibling not in self.parameters:
                    raise ValueError(
                        f"assertion '{self.code}': parameter '{key}' depends on "
                        f"unknown parameter '{sibling}'"
                    )
        return self

    def get_parameter(self, key: str) -> Optional[ParameterSpec]:
        """Get a parameter schema by key."""
        return self.parameters.get(key)

    def active_parameters(self, values: dict[str, Any]) -> dict[str, Any]:
        """
        Drop values of conditional parameters that do not currently apply.

        Keys that are not part of the schema are free-form and kept as-is.

        Args:
            values: Parameter values entered by the learner

        Returns:
            New dictionary with inactive conditional values removed
        """
        return {
            key: value
            for key, value in values.items()
            if key not in self.parameters or self.parameters[key].is_active(values)
        }


__all__ = [
    'ParameterOption',
    'ParameterSpec',
    'AssertionDefinition',
]
