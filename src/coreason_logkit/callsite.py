# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logkit

import sys

UNKNOWN_CALLER = "<unknown>"


def caller_path(depth: int = 1) -> str:
    """
    Returns the source file of the frame `depth` levels above the caller.

    `caller_path()` called inside a function gives the file that called
    that function.
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return UNKNOWN_CALLER
    return frame.f_code.co_filename
