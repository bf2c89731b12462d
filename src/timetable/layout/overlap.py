# SPDX-License-Identifier: MIT

import datetime


def date_ranges_overlap(
    a_start: datetime.datetime,
    a_end: datetime.datetime,
    b_start: datetime.datetime,
    b_end: datetime.datetime,
) -> bool:
    """True when the closed intervals [a_start, a_end] and [b_start, b_end] meet."""
    if a_start <= b_start <= a_end:
        return True  # b starts in a
    if a_start <= b_end <= a_end:
        return True  # b ends in a
    if b_start <= a_start and a_end <= b_end:
        return True  # a in b
    return False
