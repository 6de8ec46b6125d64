# Monetary amounts and distances: non-negative, at most 12 integer digits and
# 2 decimal places, the range of a Numeric(14, 2) column
MONEY_PATTERN = r"^\d{1,12}(\.\d{1,2})?$"

# Percentages and efficiencies: non-negative, at most 4 decimal places
RATE_PATTERN = r"^\d{1,6}(\.\d{1,4})?$"

# Latest model or calendar year accepted by the calculators
MAX_YEAR = 2100
