# -*- coding: utf-8 -*-
"""
Console logger for the demo driver and CLI: info on stdout, problems on
stderr. The solver core does not log.
"""
import sys, time

_DEBUG = False


def set_debug(enabled: bool) -> None:
    global _DEBUG
    _DEBUG = bool(enabled)


def is_debug() -> bool:
    return _DEBUG


def _stamp() -> str:
    return time.strftime('%H:%M:%S')


def info(msg: str):  print(f"[{_stamp()}] {msg}", file=sys.stdout)
def warn(msg: str):  print(f"[{_stamp()}] WARNING: {msg}", file=sys.stderr)
def error(msg: str): print(f"[{_stamp()}] ERROR: {msg}", file=sys.stderr)


def debug(msg: str):
    if _DEBUG:
        print(f"[{_stamp()}] DEBUG: {msg}", file=sys.stdout)
