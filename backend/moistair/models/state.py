"""
Pydantic models for state resolution input/output.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from moistair.config import (
    DEFAULT_MASS_FLOW,
    DEFAULT_PRECISION,
    DEFAULT_PRESSURE,
    VariableKind,
)


class ResolverConfig(BaseModel):
    """Per-call configuration of the resolver. Immutable."""

    model_config = ConfigDict(frozen=True)

    total_pressure: float = Field(
        default=DEFAULT_PRESSURE,
        gt=0,
        description="Total (barometric) pressure in Pa",
    )
    reference_mass_flow: float = Field(
        default=DEFAULT_MASS_FLOW,
        ge=0,
        description="Dry-air mass flow (kg/s) used when no flow variable is given",
    )


class StateInput(BaseModel):
    """Input model for resolving a state from two independent variables."""

    var1: Optional[VariableKind] = Field(
        default=None,
        description="First independent variable",
        examples=["Tdb"],
    )
    val1: Optional[float] = Field(default=None, examples=[40.227])
    var2: Optional[VariableKind] = Field(
        default=None,
        description="Second independent variable",
        examples=["RH"],
    )
    val2: Optional[float] = Field(default=None, examples=[50.456])
    total_pressure: float = Field(
        default=DEFAULT_PRESSURE,
        gt=0,
        description="Total pressure in Pa",
    )
    reference_mass_flow: float = Field(
        default=DEFAULT_MASS_FLOW,
        ge=0,
        description="Reference dry-air mass flow in kg/s",
    )
    precision: int = Field(
        default=DEFAULT_PRECISION,
        description="Significant digits for formatted output: 4, 6 or 8",
    )

    def to_config(self) -> ResolverConfig:
        return ResolverConfig(
            total_pressure=self.total_pressure,
            reference_mass_flow=self.reference_mass_flow,
        )


class ThermodynamicState(BaseModel):
    """
    Fully resolved moist-air state. All fields are populated together.

    Tdp is -inf for perfectly dry air (W = 0). JSON has no infinity, so it is
    serialized as null; the formatted rows carry "-∞".
    """

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="null")

    Tdb: float = Field(..., description="Dry-bulb temperature (°C)")
    W: float = Field(..., description="Humidity ratio (kg_w/kg_da)")
    RH: float = Field(..., description="Relative humidity (0-100%)")
    h: float = Field(..., description="Specific enthalpy (kJ/kg_da)")
    Twb: float = Field(..., description="Wet-bulb temperature (°C)")
    Tdp: float = Field(
        ...,
        description="Dew point temperature (°C); null in JSON for dry air (-inf)",
    )
    Pv: float = Field(..., description="Partial vapor pressure (Pa)")
    rho: float = Field(..., description="Moist-air density (kg/m³)")
    m_da: float = Field(..., description="Dry-air mass flow (kg/s)")
    V_dot: float = Field(..., description="Volumetric flow (m³/h)")
    P_total: float = Field(..., description="Total pressure (Pa)")


class FormattedRow(BaseModel):
    """One line of the results table."""

    key: str
    label: str
    unit: str
    value: str


class StateOutput(BaseModel):
    """API response: the raw state plus its formatted results table."""

    input_pair: tuple[VariableKind, VariableKind]
    input_values: tuple[float, float]
    precision: int
    state: ThermodynamicState
    rows: list[FormattedRow]
