from .optional import Optional, Present, EMPTY, of, of_nullable, empty
from .errors import OptionalError, InvariantViolation, NoSuchElement
from .logger import ConsoleLogger
