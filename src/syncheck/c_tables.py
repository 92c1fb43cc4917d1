# region License
# -----------------------------------------------------------------------------
# syncheck: c_tables.py
#
# Copyright (C) 2024, the syncheck authors
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the conditions in the LICENSE
# file distributed with this package are met.
# -----------------------------------------------------------------------------
# endregion
# Generated by `python -m syncheck.compiler`. Do not edit by hand.
"""Compiled LALR(1) parse tables for the teaching grammar in c_grammar.py."""

from .tables import ParseTables

__all__ = ("TABLES",)


TABLES = ParseTables(
    symbols=(
        "$end", "error", "$undefined", "ID", "NUM", "INT", "FLOAT", "CHAR",
        "DOUBLE", "IF", "ELSE", "DO", "WHILE", "FOR", "SWITCH", "CASE",
        "DEFAULT", "BREAK", "INC", "DEC", "ADDASSIGN", "SUBASSIGN", "EQ", "NEQ",
        "LE", "GE", "LT", "GT", "AND", "OR", "+", "-",
        "*", "/", "%", "UMINUS", ";", ",", "=", "[",
        "]", "(", ")", "{", "}", ":", "!", "$accept",
        "program", "stmt_list", "stmt", "decl_stmt", "type", "declarator_list", "declarator", "dim_list",
        "if_stmt", "do_while_stmt", "while_stmt", "for_stmt", "for_init", "for_init_list", "for_init_item", "for_cond",
        "for_update", "for_update_list", "for_update_item", "switch_stmt", "case_list", "case_clause", "block", "expr_stmt",
        "expr", "index_list",
    ),
    ntokens=47,
    final_state=3,
    pact_ninf=-39,
    table_ninf=-1,
    pact=(
        -39, 24, 116, -39, -10, -39, -39, -39, -39, -39, -15, 116, -5, 28, 43, 53,
        88, 91, 67, 67, -39, 67, -39, -39, 93, -39, -39, -39, -39, -39, -39, -39,
        284, 64, 66, 67, 67, 67, 67, 65, 67, 97, 67, 69, 67, -39, -39, -39,
        -6, -39, 141, 49, 344, 26, 42, -39, 67, 67, 67, 67, 67, 67, 67, 67,
        67, 67, 67, 67, 67, -39, -39, -39, 299, 314, 329, 246, 67, 162, 62, 183,
        72, 108, 76, 78, -39, 204, -39, -39, -39, -39, 67, 112, 44, -39, 93, 381,
        381, 106, 106, 106, 106, 370, 357, -2, -2, -39, -39, -39, -39, -39, -39, -39,
        265, 116, 67, 116, 67, 79, 67, 69, 75, 344, 86, 67, 128, -39, -39, 131,
        225, -39, 344, 67, 109, 344, -39, -39, -39, 344, 110, 116, 113, 344, 19, -9,
        -39, -39, -39, -4, 143, 148, 111, 115, -39, 84, 132, -39, -39, -39, -39, 67,
        67, 67, -39, -39, 116, 19, 133, 134, -39, 344, 344, 344, -39, -39, -39, -39,
        116, 116, 116,
    ),
    defact=(
        3, 0, 2, 1, 86, 87, 15, 16, 17, 18, 0, 0, 0, 0, 0, 0,
        0, 0, 0, 0, 3, 0, 4, 5, 0, 6, 7, 8, 9, 10, 11, 12,
        0, 80, 81, 0, 0, 0, 0, 84, 0, 0, 0, 32, 0, 13, 82, 83,
        86, 78, 0, 0, 79, 21, 0, 19, 0, 0, 0, 0, 0, 0, 0, 0,
        0, 0, 0, 0, 0, 64, 62, 63, 0, 0, 0, 0, 0, 0, 0, 0,
        0, 0, 0, 33, 34, 0, 80, 81, 85, 58, 0, 0, 23, 14, 0, 70,
        71, 74, 75, 72, 73, 76, 77, 65, 66, 67, 68, 69, 60, 61, 59, 88,
        0, 0, 0, 0, 0, 38, 39, 0, 0, 22, 0, 0, 0, 20, 89, 27,
        0, 30, 36, 0, 0, 40, 35, 53, 25, 24, 0, 0, 0, 37, 41, 0,
        26, 28, 29, 0, 0, 0, 0, 42, 43, 0, 0, 52, 54, 45, 46, 0,
        0, 0, 47, 48, 0, 0, 0, 0, 3, 49, 50, 51, 31, 44, 3, 3,
        57, 56, 55,
    ),
    pgoto=(
        -39, -39, -20, -8, -39, -38, -39, 82, -39, -39, -39, -39, -39, -39, -39, 39,
        -39, -39, -39, 15, -39, -39, -39, -39, -39, -17, -39,
    ),
    defgoto=(
        0, 1, 2, 22, 23, 24, 54, 55, 92, 25, 26, 27, 28, 82, 83, 84,
        132, 150, 151, 152, 29, 143, 156, 30, 31, 32, 39,
    ),
    table=(
        51, 49, 50, 41, 52, 81, 153, 154, 33, 34, 35, 36, 86, 87, 157, 158,
        159, 160, 72, 73, 74, 75, 147, 77, 3, 79, 40, 85, 37, 38, 66, 67,
        68, 38, 161, 155, 42, 148, 149, 95, 96, 97, 98, 99, 100, 101, 102, 103,
        104, 105, 106, 107, 4, 5, 6, 7, 8, 9, 10, 112, 11, 12, 13, 14,
        90, 91, 15, 16, 17, 43, 48, 5, 80, 121, 6, 7, 8, 9, 93, 94,
        18, 81, 123, 124, 44, 16, 17, 166, 167, 45, 19, 46, 20, 89, 47, 21,
        53, 128, 18, 130, 70, 133, 71, 114, 76, 127, 137, 129, 19, 78, 116, 117,
        118, 21, 141, 119, 122, 131, 135, 4, 5, 6, 7, 8, 9, 10, 136, 11,
        12, 13, 14, 145, 138, 15, 16, 17, 64, 65, 66, 67, 68, 139, 169, 170,
        171, 142, 162, 18, 176, 146, 144, 163, 165, 164, 177, 178, 172, 19, 134, 20,
        0, 0, 21, 56, 57, 58, 59, 60, 61, 62, 63, 64, 65, 66, 67, 68,
        125, 168, 174, 175, 173, 0, 0, 88, 56, 57, 58, 59, 60, 61, 62, 63,
        64, 65, 66, 67, 68, 0, 0, 0, 0, 0, 0, 0, 113, 56, 57, 58,
        59, 60, 61, 62, 63, 64, 65, 66, 67, 68, 0, 0, 0, 0, 0, 0,
        0, 115, 56, 57, 58, 59, 60, 61, 62, 63, 64, 65, 66, 67, 68, 0,
        0, 0, 0, 0, 0, 0, 120, 56, 57, 58, 59, 60, 61, 62, 63, 64,
        65, 66, 67, 68, 0, 0, 0, 0, 0, 0, 0, 140, 56, 57, 58, 59,
        60, 61, 62, 63, 64, 65, 66, 67, 68, 0, 0, 0, 0, 0, 111, 56,
        57, 58, 59, 60, 61, 62, 63, 64, 65, 66, 67, 68, 0, 0, 0, 0,
        0, 126, 56, 57, 58, 59, 60, 61, 62, 63, 64, 65, 66, 67, 68, 0,
        69, 56, 57, 58, 59, 60, 61, 62, 63, 64, 65, 66, 67, 68, 0, 108,
        56, 57, 58, 59, 60, 61, 62, 63, 64, 65, 66, 67, 68, 0, 109, 56,
        57, 58, 59, 60, 61, 62, 63, 64, 65, 66, 67, 68, 0, 110, 56, 57,
        58, 59, 60, 61, 62, 63, 64, 65, 66, 67, 68, 56, 57, 58, 59, 60,
        61, 62, 0, 64, 65, 66, 67, 68, 56, 57, 58, 59, 60, 61, 0, 0,
        64, 65, 66, 67, 68, 58, 59, 60, 61, 0, 0, 64, 65, 66, 67, 68,
    ),
    check=(
        20, 18, 19, 11, 21, 43, 15, 16, 18, 19, 20, 21, 18, 19, 18, 19,
        20, 21, 35, 36, 37, 38, 3, 40, 0, 42, 41, 44, 38, 39, 32, 33,
        34, 39, 38, 44, 41, 18, 19, 56, 57, 58, 59, 60, 61, 62, 63, 64,
        65, 66, 67, 68, 3, 4, 5, 6, 7, 8, 9, 76, 11, 12, 13, 14,
        38, 39, 17, 18, 19, 41, 3, 4, 3, 90, 5, 6, 7, 8, 36, 37,
        31, 119, 38, 39, 41, 18, 19, 3, 4, 36, 41, 3, 43, 44, 3, 46,
        3, 114, 31, 116, 36, 118, 36, 41, 39, 113, 123, 115, 41, 12, 38, 3,
        36, 46, 131, 37, 4, 38, 43, 3, 4, 5, 6, 7, 8, 9, 40, 11,
        12, 13, 14, 139, 4, 17, 18, 19, 30, 31, 32, 33, 34, 10, 159, 160,
        161, 36, 3, 31, 168, 36, 40, 3, 37, 42, 174, 175, 164, 41, 119, 43,
        -1, -1, 46, 22, 23, 24, 25, 26, 27, 28, 29, 30, 31, 32, 33, 34,
        94, 45, 45, 45, 165, -1, -1, 42, 22, 23, 24, 25, 26, 27, 28, 29,
        30, 31, 32, 33, 34, -1, -1, -1, -1, -1, -1, -1, 42, 22, 23, 24,
        25, 26, 27, 28, 29, 30, 31, 32, 33, 34, -1, -1, -1, -1, -1, -1,
        -1, 42, 22, 23, 24, 25, 26, 27, 28, 29, 30, 31, 32, 33, 34, -1,
        -1, -1, -1, -1, -1, -1, 42, 22, 23, 24, 25, 26, 27, 28, 29, 30,
        31, 32, 33, 34, -1, -1, -1, -1, -1, -1, -1, 42, 22, 23, 24, 25,
        26, 27, 28, 29, 30, 31, 32, 33, 34, -1, -1, -1, -1, -1, 40, 22,
        23, 24, 25, 26, 27, 28, 29, 30, 31, 32, 33, 34, -1, -1, -1, -1,
        -1, 40, 22, 23, 24, 25, 26, 27, 28, 29, 30, 31, 32, 33, 34, -1,
        36, 22, 23, 24, 25, 26, 27, 28, 29, 30, 31, 32, 33, 34, -1, 36,
        22, 23, 24, 25, 26, 27, 28, 29, 30, 31, 32, 33, 34, -1, 36, 22,
        23, 24, 25, 26, 27, 28, 29, 30, 31, 32, 33, 34, -1, 36, 22, 23,
        24, 25, 26, 27, 28, 29, 30, 31, 32, 33, 34, 22, 23, 24, 25, 26,
        27, 28, -1, 30, 31, 32, 33, 34, 22, 23, 24, 25, 26, 27, -1, -1,
        30, 31, 32, 33, 34, 24, 25, 26, 27, -1, -1, 30, 31, 32, 33, 34,
    ),
    r1=(
        0, 47, 48, 49, 49, 50, 50, 50, 50, 50, 50, 50, 50, 50, 51, 52,
        52, 52, 52, 53, 53, 54, 54, 54, 54, 55, 55, 56, 56, 57, 58, 59,
        60, 60, 61, 61, 62, 62, 62, 63, 63, 64, 64, 65, 65, 66, 66, 66,
        66, 66, 66, 66, 67, 68, 68, 69, 69, 69, 70, 71, 71, 71, 71, 71,
        71, 72, 72, 72, 72, 72, 72, 72, 72, 72, 72, 72, 72, 72, 72, 72,
        72, 72, 72, 72, 72, 72, 72, 72, 73, 73,
    ),
    r2=(
        0, 2, 1, 0, 2, 1, 1, 1, 1, 1, 1, 1, 1, 2, 3, 1,
        1, 1, 1, 1, 3, 1, 3, 2, 4, 3, 4, 5, 7, 7, 5, 9,
        0, 1, 1, 3, 3, 4, 2, 0, 1, 0, 1, 1, 3, 2, 2, 2,
        2, 3, 3, 3, 7, 0, 2, 4, 4, 3, 3, 4, 4, 4, 3, 3,
        2, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 2, 2,
        2, 2, 2, 2, 2, 3, 1, 1, 3, 4,
    ),
)
