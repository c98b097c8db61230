from .base_generator import BaseGenerator
from .mysql_generator import MySqlGenerator
from .oracle_generator import OracleGenerator
from .postgres_generator import PostgresGenerator

__all__ = ['BaseGenerator', 'MySqlGenerator', 'OracleGenerator', 'PostgresGenerator']
