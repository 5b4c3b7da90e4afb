"""
Moist-air state resolver configuration and constants.
"""

from enum import Enum


class VariableKind(str, Enum):
    Tdb = "Tdb"      # Dry-bulb temperature (°C)
    W = "W"          # Humidity ratio (kg_w/kg_da)
    RH = "RH"        # Relative humidity (%)
    h = "h"          # Specific enthalpy (kJ/kg_da)
    Twb = "Twb"      # Wet-bulb temperature (°C)
    Tdp = "Tdp"      # Dew point temperature (°C)
    Pv = "Pv"        # Partial vapor pressure (Pa)
    m_da = "m_da"    # Dry-air mass flow (kg/s)
    V_dot = "V_dot"  # Volumetric flow (m³/h)


# Supported input pair combinations for state resolution.
# Order inside a pair is irrelevant; the resolver looks pairs up unordered.
SUPPORTED_INPUT_PAIRS: list[tuple[VariableKind, VariableKind]] = [
    (VariableKind.Tdb, VariableKind.RH),
    (VariableKind.Tdb, VariableKind.W),
    (VariableKind.Tdb, VariableKind.h),
    (VariableKind.Tdb, VariableKind.Twb),
    (VariableKind.Tdb, VariableKind.Tdp),
    (VariableKind.Tdb, VariableKind.Pv),
    (VariableKind.W, VariableKind.h),
    (VariableKind.RH, VariableKind.W),
]

# Default total pressure at sea level
DEFAULT_PRESSURE = 101325.0  # Pa

# Default reference dry-air mass flow
DEFAULT_MASS_FLOW = 1.0  # kg/s

# Default altitude (sea level)
DEFAULT_ALTITUDE = 0.0  # meters

# Physical constants
R_DA = 287.058      # J/(kg·K), gas constant of dry air
C_DA = 1.006        # kJ/(kg·K), specific heat of dry air
H_FG_0 = 2501.0     # kJ/kg, latent heat of vaporization at 0°C
H_FG_T = 1.86       # kJ/(kg·K), slope of the latent heat term
K_W = 0.622         # molar mass ratio water / dry air
R_MIX_FACTOR = 1.6078  # humidity weighting in the mixture gas constant
KELVIN_OFFSET = 273.15
FLOW_FACTOR = 3.6   # V_dot [m³/h] = m_da / rho × FLOW_FACTOR

# Magnus correlation over liquid water, valid -50°C to +200°C
MAGNUS_A = 17.27
MAGNUS_B = 237.7     # °C
MAGNUS_P_REF = 611.2  # Pa, saturation pressure at 0°C

# Validity thresholds
RH_REJECT_THRESHOLD = 100.5  # %, above this the state is supersaturated
DEW_POINT_SLACK = 0.1        # °C, allowed Tdp excess over Tdb

# Bisection settings
TEMPERATURE_TOL = 0.01        # °C, dry-bulb search from (W, h)
WET_BULB_TOL = 0.001          # °C
HUMIDITY_RATIO_TOL = 1e-6     # kg/kg
TEMPERATURE_MAX_ITER = 50
HUMIDITY_RATIO_MAX_ITER = 100
TDB_SEARCH_MIN = -50.0        # °C
TDB_SEARCH_MAX = 100.0        # °C
WET_BULB_FLOOR = -50.0        # °C
WET_BULB_DEW_POINT_MARGIN = 5.0  # °C below Tdp where the wet-bulb bracket starts

# Chart axis ranges
CHART_RANGES = {
    "Tdb_min": -10.0,  # °C
    "Tdb_max": 50.0,   # °C
    "Tdb_step": 0.5,   # °C
    "Tdb_tick": 5.0,   # °C
    "W_min": 0.0,      # kg/kg
    "W_max": 0.03,     # kg/kg
    "W_tick": 0.005,   # kg/kg
}

# Display precisions (significant digits)
SUPPORTED_PRECISIONS = (4, 6, 8)
DEFAULT_PRECISION = 4

# Property units for display
PROPERTY_UNITS = {
    "Tdb": "°C",
    "W": "kg_w/kg_da",
    "RH": "%",
    "h": "kJ/kg_da",
    "Twb": "°C",
    "Tdp": "°C",
    "Pv": "Pa",
    "rho": "kg/m³",
    "m_da": "kg/s",
    "V_dot": "m³/h",
    "P_total": "Pa",
}

# Display names and short explanations, keyed like ThermodynamicState fields
VARIABLE_INFO = {
    "Tdb": {
        "name": "Dry-bulb temperature",
        "explanation": (
            "Air temperature read by an ordinary thermometer, without any "
            "correction for moisture. The basic independent variable of a "
            "moist-air state."
        ),
    },
    "W": {
        "name": "Humidity ratio",
        "explanation": (
            "Mass of water vapor carried by 1 kg of dry air. An absolute "
            "measure of moisture, between 0 (dry air) and W_sat (saturated "
            "air at the same temperature)."
        ),
    },
    "RH": {
        "name": "Relative humidity",
        "explanation": (
            "Vapor pressure as a percentage of the saturation pressure at the "
            "same temperature. 100% means saturated air."
        ),
    },
    "h": {
        "name": "Specific enthalpy",
        "explanation": (
            "Energy content per kg of dry air: sensible heat of the air plus "
            "latent heat of the vapor it carries, referenced to 0°C."
        ),
    },
    "Twb": {
        "name": "Wet-bulb temperature",
        "explanation": (
            "Temperature reached by adiabatic evaporation of water into the "
            "air until saturation. Always lower than or equal to the dry-bulb "
            "temperature."
        ),
    },
    "Tdp": {
        "name": "Dew point temperature",
        "explanation": (
            "Temperature at which the air becomes saturated when cooled at "
            "constant pressure and moisture content. Condensation starts "
            "below it."
        ),
    },
    "Pv": {
        "name": "Vapor pressure",
        "explanation": (
            "Partial pressure of the water vapor in the mixture. Always below "
            "the saturation pressure at the current temperature."
        ),
    },
    "rho": {
        "name": "Density",
        "explanation": (
            "Mass of moist air per unit volume, from the ideal-gas law with a "
            "humidity-weighted gas constant."
        ),
    },
    "m_da": {
        "name": "Dry-air mass flow",
        "explanation": (
            "Mass of dry air passing per unit time. Used for energy balances "
            "in HVAC systems; converted to volumetric flow through density."
        ),
    },
    "V_dot": {
        "name": "Volumetric flow",
        "explanation": (
            "Volume of moist air passing per unit time. Related to the mass "
            "flow through density; used to size ducts and fans."
        ),
    },
}
