"""
SQL Generation Package - turns a parsed Schema into dialect-specific DDL.

Main Components:
    - MySqlGenerator / PostgresGenerator / OracleGenerator
    - DbmsType, get_generator(): the dialect selector
    - check_ddl_syntax(): offline sqlglot parse of generated DDL
    - SchemaOrchestrator: load → edit → generate workflow

Usage:
    from schema2script.services.sql_generation import SchemaOrchestrator

    orchestrator = SchemaOrchestrator()
    orchestrator.load_schema("tables.xml")
    result = orchestrator.generate_sql("PostgreSQL")
"""

from .generators import BaseGenerator, MySqlGenerator, OracleGenerator, PostgresGenerator
from .orchestrator import SchemaOrchestrator
from .utils.dialect_utils import DbmsType, get_generator
from .utils.syntax_check import check_ddl_syntax

__all__ = [
    'BaseGenerator',
    'DbmsType',
    'MySqlGenerator',
    'OracleGenerator',
    'PostgresGenerator',
    'SchemaOrchestrator',
    'check_ddl_syntax',
    'get_generator',
]
