from .generators.sqs import generate_sqs_statement
from .types import Statement
