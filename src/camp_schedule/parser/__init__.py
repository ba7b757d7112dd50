"""Tolerant CSV-to-schedule parser."""

from camp_schedule.parser.builder import parse_schedule, parse_schedule_with_stats
from camp_schedule.parser.headers import build_header_hints, is_header_row
from camp_schedule.parser.rows import classify_row
from camp_schedule.parser.tokenizer import tokenize_line

__all__ = [
    "parse_schedule",
    "parse_schedule_with_stats",
    "tokenize_line",
    "is_header_row",
    "build_header_hints",
    "classify_row",
]
