"""Personal codes used across the test suite.

Ages are given for the suite's fixed decision date, 2025-06-15.
"""

from datetime import date

TODAY = date(2025, 6, 15)

# Born 1990-02-01, age 35
SEGMENT_1_CODE = "49002013008"  # segment 3008: modifier 100, Estonia
SEGMENT_2_CODE = "49002015002"  # segment 5002: modifier 300, Latvia
SEGMENT_3_CODE = "49002018004"  # segment 8004: modifier 1000, Lithuania
DEBT_CODE = "49002010965"  # segment 0965: no credit
DEBT_CODE_1200 = "49002011200"  # segment 1200: no credit

# Born 2007-06-15, turns 18 on TODAY (segment 3001, modifier 100)
EIGHTEEN_TODAY_CODE = "60706153001"
# Born 2010-01-01, age 15
UNDERAGE_CODE = "61001013000"
# Born 1953-01-01, age 72
SENIOR_LITHUANIA_CODE = "35301018002"  # max eligible age 71
SENIOR_ESTONIA_CODE = "35301013003"  # max eligible age 74
# Born 2004-03-01 (leap year)
LEAP_YEAR_CODE = "60403013009"
