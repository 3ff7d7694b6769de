"""
Configuration for the key-agreement engine.

- DHSettings: validated Pydantic model of the DH widths and ranges.
- load_settings: builds DHSettings from the environment / a .env file.

Defaults are deliberately small:
a 63-bit prime, a 3-bit generator and a secret exponent in [1, 10].
"""

import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, model_validator

from dhcrypt.common.utils import byte_length

# --- Environment variable names ---

ENV_PRIME_BITS = "DH_PRIME_BITS"
ENV_BASE_BITS = "DH_BASE_BITS"
ENV_SECRET_MIN = "DH_SECRET_MIN"
ENV_SECRET_MAX = "DH_SECRET_MAX"
ENV_VERBOSE = "DH_VERBOSE"

_TRUE_STRINGS = {"1", "true", "yes", "on"}


class DHSettings(BaseModel):
    """
    Widths and ranges used by KeyAgreement.

    prime_bits:          bit-width W_p of the modulus p
    base_bits:           bit-width W_g of the generator g
    secret_min/max:      inclusive range of the secret exponent x
    verbose:             print [DH]/[Blowfish] status lines
    """
    prime_bits: int = 63
    base_bits: int = 3
    secret_min: int = 1
    secret_max: int = 10
    verbose: bool = False

    @model_validator(mode="after")
    def _check_ranges(self) -> "DHSettings":
        if self.prime_bits < 2:
            raise ValueError("prime_bits must be at least 2.")
        if not 2 <= self.base_bits < self.prime_bits:
            raise ValueError("base_bits must be at least 2 and smaller than prime_bits.")
        if self.secret_min < 1:
            raise ValueError("secret_min must be positive.")
        if self.secret_min > self.secret_max:
            raise ValueError("secret_min must not exceed secret_max.")
        return self

    @property
    def shared_secret_size(self) -> int:
        """Length in bytes of a serialized shared secret."""
        return byte_length(self.prime_bits)


def load_settings(env_file: Optional[str] = None) -> DHSettings:
    """
    Reads DH_* variables (after loading a .env file) into DHSettings.

    Unset variables keep the model defaults.

    Raises:
        pydantic.ValidationError: If a variable is malformed or out of range.
    """
    # Load environment variables from .env file
    load_dotenv(env_file)

    env_map = {
        "prime_bits": ENV_PRIME_BITS,
        "base_bits": ENV_BASE_BITS,
        "secret_min": ENV_SECRET_MIN,
        "secret_max": ENV_SECRET_MAX,
    }
    values = {}
    for field, var in env_map.items():
        raw = os.getenv(var)
        if raw is not None and raw.strip():
            values[field] = raw.strip()

    verbose = os.getenv(ENV_VERBOSE)
    if verbose is not None:
        values["verbose"] = verbose.strip().lower() in _TRUE_STRINGS

    # Pydantic coerces the numeric strings and runs the range checks
    return DHSettings.model_validate(values)
