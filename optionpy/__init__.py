from .option import Option, Some, NONE, none, from_nullable, from_unsafe, all_present
from .errors import OptionError, EmptyAccess
from .result import Result, Ok, Err
from .logger import ConsoleLogger, get_logger, configure
