"""SQL functions whose spelling differs between database backends.

Production runs on MySQL; the test suite runs on SQLite. Each function
compiles to the native form for the active dialect, with format strings
passed as bound parameters rather than inlined into the SQL text.

    from libs.db.functions import year_month

    select(year_month(Supporter.created_at).label("month"), ...)
"""

from sqlalchemy import String, literal
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import GenericFunction


class year_month(GenericFunction):
    """``YYYY-MM`` bucket key of a timestamp column."""

    type = String()
    name = "year_month"
    inherit_cache = True


class concat_values(GenericFunction):
    """Comma-joined aggregate of a column within each group (NULL for none)."""

    type = String()
    name = "concat_values"
    inherit_cache = True


def _only_argument(element, compiler, **kw) -> str:
    (argument,) = list(element.clauses)
    return compiler.process(argument, **kw)


@compiles(year_month)
def _year_month_default(element, compiler, **kw):
    return "to_char(%s, %s)" % (
        _only_argument(element, compiler, **kw),
        compiler.process(literal("YYYY-MM"), **kw),
    )


@compiles(year_month, "mysql")
def _year_month_mysql(element, compiler, **kw):
    return "DATE_FORMAT(%s, %s)" % (
        _only_argument(element, compiler, **kw),
        compiler.process(literal("%Y-%m"), **kw),
    )


@compiles(year_month, "sqlite")
def _year_month_sqlite(element, compiler, **kw):
    return "strftime(%s, %s)" % (
        compiler.process(literal("%Y-%m"), **kw),
        _only_argument(element, compiler, **kw),
    )


@compiles(concat_values)
def _concat_values_default(element, compiler, **kw):
    return "group_concat(%s)" % _only_argument(element, compiler, **kw)


@compiles(concat_values, "postgresql")
def _concat_values_postgresql(element, compiler, **kw):
    return "string_agg(%s, %s)" % (
        _only_argument(element, compiler, **kw),
        compiler.process(literal(","), **kw),
    )
