# region License
# -----------------------------------------------------------------------------
# syncheck: c_grammar.py
#
# Copyright (C) 2024, the syncheck authors
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the conditions in the LICENSE
# file distributed with this package are met.
# -----------------------------------------------------------------------------
# endregion
"""The grammar of the teaching language.

Extended Summary
----------------
Rules are written the way SLY's ``@_`` decorator takes them, ``"name : sym sym ..."``, with single-character
literals in quotes and an optional trailing ``%prec``. The rule order fixes rule numbers, and on reduce/reduce
conflicts the earlier rule wins.

The grammar has a few shift/reduce conflicts, all resolved in favour of shifting:

- The dangling ``else`` binds to the nearest ``if``.
- ``!`` has no precedence, so ``!a + b`` reads as ``!(a + b)``.
- ``a++ ;`` at the start of a statement is the increment statement, not an expression statement.
"""

from sly.yacc import Grammar

from .compiler import make_grammar

__all__ = ("EXPECTED_CONFLICTS", "PRECEDENCE", "RULES", "TERMINALS", "build_grammar")


# fmt: off
TERMINALS = (
    # Identifiers and numbers
    "ID", "NUM",

    # Keywords
    "INT", "FLOAT", "CHAR", "DOUBLE",
    "IF", "ELSE", "DO", "WHILE", "FOR", "SWITCH", "CASE", "DEFAULT", "BREAK",

    # Multi-character operators
    "INC", "DEC", "ADDASSIGN", "SUBASSIGN",
    "EQ", "NEQ", "LE", "GE", "LT", "GT", "AND", "OR",

    # Arithmetic operators, in precedence order
    "+", "-", "*", "/", "%", "UMINUS",

    # Punctuation
    ";", ",", "=", "[", "]", "(", ")", "{", "}", ":", "!",
)

PRECEDENCE = (
    ("left", "OR"),
    ("left", "AND"),
    ("left", "EQ", "NEQ"),
    ("left", "LT", "GT", "LE", "GE"),
    ("left", "+", "-"),
    ("left", "*", "/", "%"),
    ("right", "UMINUS"),
)
# fmt: on

EXPECTED_CONFLICTS = 16
"""Shift/reduce conflicts the grammar is known to have. See the module docstring."""


RULES = (
    # region ---- Program structure
    "program : stmt_list",

    "stmt_list : ",
    "stmt_list : stmt_list stmt",

    "stmt : decl_stmt",
    "stmt : if_stmt",
    "stmt : do_while_stmt",
    "stmt : while_stmt",
    "stmt : for_stmt",
    "stmt : switch_stmt",
    "stmt : block",
    "stmt : expr_stmt",
    "stmt : BREAK ';'",
    # endregion

    # region ---- Declarations
    "decl_stmt : type declarator_list ';'",

    "type : INT",
    "type : FLOAT",
    "type : CHAR",
    "type : DOUBLE",

    "declarator_list : declarator",
    "declarator_list : declarator_list ',' declarator",

    "declarator : ID",
    "declarator : ID '=' expr",
    "declarator : ID dim_list",
    "declarator : ID dim_list '=' expr",

    "dim_list : '[' NUM ']'",
    "dim_list : dim_list '[' NUM ']'",
    # endregion

    # region ---- Control flow
    "if_stmt : IF '(' expr ')' stmt",
    "if_stmt : IF '(' expr ')' stmt ELSE stmt",

    "do_while_stmt : DO stmt WHILE '(' expr ')' ';'",

    "while_stmt : WHILE '(' expr ')' stmt",

    "for_stmt : FOR '(' for_init ';' for_cond ';' for_update ')' stmt",

    "for_init : ",
    "for_init : for_init_list",

    "for_init_list : for_init_item",
    "for_init_list : for_init_list ',' for_init_item",

    "for_init_item : ID '=' expr",
    "for_init_item : type ID '=' expr",
    "for_init_item : type ID",

    "for_cond : ",
    "for_cond : expr",

    "for_update : ",
    "for_update : for_update_list",

    "for_update_list : for_update_item",
    "for_update_list : for_update_list ',' for_update_item",

    "for_update_item : ID INC",
    "for_update_item : ID DEC",
    "for_update_item : INC ID",
    "for_update_item : DEC ID",
    "for_update_item : ID '=' expr",
    "for_update_item : ID ADDASSIGN expr",
    "for_update_item : ID SUBASSIGN expr",

    "switch_stmt : SWITCH '(' expr ')' '{' case_list '}'",

    "case_list : ",
    "case_list : case_list case_clause",

    "case_clause : CASE NUM ':' stmt_list",
    "case_clause : CASE ID ':' stmt_list",
    "case_clause : DEFAULT ':' stmt_list",

    "block : '{' stmt_list '}'",
    # endregion

    # region ---- Expression statements
    "expr_stmt : ID '=' expr ';'",
    "expr_stmt : ID ADDASSIGN expr ';'",
    "expr_stmt : ID SUBASSIGN expr ';'",
    "expr_stmt : ID INC ';'",
    "expr_stmt : ID DEC ';'",
    "expr_stmt : expr ';'",
    # endregion

    # region ---- Expressions
    "expr : expr '+' expr",
    "expr : expr '-' expr",
    "expr : expr '*' expr",
    "expr : expr '/' expr",
    "expr : expr '%' expr",
    "expr : expr EQ expr",
    "expr : expr NEQ expr",
    "expr : expr LT expr",
    "expr : expr GT expr",
    "expr : expr LE expr",
    "expr : expr GE expr",
    "expr : expr AND expr",
    "expr : expr OR expr",
    "expr : '-' expr %prec UMINUS",
    "expr : '!' expr",
    "expr : ID INC",
    "expr : ID DEC",
    "expr : INC ID",
    "expr : DEC ID",
    "expr : ID index_list",
    "expr : '(' expr ')'",
    "expr : ID",
    "expr : NUM",

    "index_list : '[' expr ']'",
    "index_list : index_list '[' expr ']'",
    # endregion
)


def build_grammar() -> Grammar:
    """Assemble the teaching grammar as a SLY grammar, ready for table construction."""

    return make_grammar(TERMINALS, RULES, PRECEDENCE, source="c_grammar")
