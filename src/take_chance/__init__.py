"""take-chance: random values for test data, ids, passwords and simulations.

Namespace use (preferred):
    import take_chance as chance

    chance.int(1, 10)
    chance.password()
    chance.string(8, letters=True, numbers=True)

Pinned source:
    from take_chance import Chance

    Chance(my_source).die(20)

Submodule imports (for the descriptive function names):
    from take_chance.scalar import random_int, secure_int, binomial
    from take_chance.text import html_id, password
"""

from take_chance._config import ChanceConfig, get_config, init
from take_chance._logging import configure_logging, get_logger
from take_chance.charset import CharacterSet, build_universe
from take_chance.composite import RGBColor
from take_chance.errors import (
    ConfigurationError,
    ConfigurationException,
    EmptyCollection,
    EmptyCollectionError,
    InvalidArgument,
    InvalidArgumentError,
    UnsatisfiableConstraints,
    UnsatisfiableConstraintsError,
)
from take_chance.namespace import Chance
from take_chance.source import EntropySource, SystemEntropy, default_source, set_default_source

# Default namespace, follows the process default source
TakeChance = Chance()

int = TakeChance.int  # noqa: A001
secure_int = TakeChance.secure_int
float = TakeChance.float  # noqa: A001
multiple_int = TakeChance.multiple_int
multiple_float = TakeChance.multiple_float
boolean = TakeChance.boolean
binomial = TakeChance.binomial
character = TakeChance.character
string = TakeChance.string
from_array = TakeChance.from_array
from_object = TakeChance.from_object
date = TakeChance.date
id = TakeChance.id  # noqa: A001
password = TakeChance.password
die = TakeChance.die
rgb_color = TakeChance.rgb_color
hex_color = TakeChance.hex_color

__all__ = [
    # Namespace
    'Chance',
    'TakeChance',
    # Sources
    'EntropySource',
    'SystemEntropy',
    'default_source',
    'set_default_source',
    # Config and logging
    'ChanceConfig',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    # Errors - struct variants
    'ConfigurationError',
    'EmptyCollection',
    'InvalidArgument',
    'UnsatisfiableConstraints',
    # Errors - exception variants
    'ConfigurationException',
    'EmptyCollectionError',
    'InvalidArgumentError',
    'UnsatisfiableConstraintsError',
    # Character sets
    'CharacterSet',
    'build_universe',
    # Colors
    'RGBColor',
    # Generators; int, float and id stay attribute-only so a star import keeps the builtins
    'binomial',
    'boolean',
    'character',
    'date',
    'die',
    'from_array',
    'from_object',
    'hex_color',
    'multiple_float',
    'multiple_int',
    'password',
    'rgb_color',
    'secure_int',
    'string',
]
