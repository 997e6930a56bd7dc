"""
Pre-computed analytics from 250,000 UPI transactions (India, 2024).

Source: upi_transactions_2024.csv. Read-only lookup tables.
"""

STATS = {
    "total": 250000,
    "fraud": 480,
    "failed": 12376,
    "volume": 327939009,
    "success_rate": 95.05,
    "fraud_rate": 0.19,
    "failure_rate": 4.95,
}

# Device x Network failure rates, peak evening 18:00-22:00
# Columns used: device_type, network_type, transaction_status, hour_of_day
FAILURE_RATES = (
    {"device": "Android", "network": "3G", "total": 3143, "failed": 164, "rate": 5.22},
    {"device": "Android", "network": "4G", "total": 38380, "failed": 1897, "rate": 4.94},
    {"device": "Android", "network": "5G", "total": 15990, "failed": 792, "rate": 4.95},
    {"device": "Android", "network": "WiFi", "total": 6479, "failed": 300, "rate": 4.63},
    {"device": "Web", "network": "3G", "total": 243, "failed": 21, "rate": 8.64},
    {"device": "Web", "network": "4G", "total": 2557, "failed": 144, "rate": 5.63},
    {"device": "Web", "network": "5G", "total": 1113, "failed": 49, "rate": 4.40},
    {"device": "Web", "network": "WiFi", "total": 442, "failed": 19, "rate": 4.30},
    {"device": "iOS", "network": "3G", "total": 795, "failed": 39, "rate": 4.91},
    {"device": "iOS", "network": "4G", "total": 10355, "failed": 506, "rate": 4.89},
    {"device": "iOS", "network": "5G", "total": 4291, "failed": 199, "rate": 4.64},
    {"device": "iOS", "network": "WiFi", "total": 1631, "failed": 83, "rate": 5.09},
)

# Fraud counts by state
# Columns used: sender_state, fraud_flag
FRAUD_BY_STATE = (
    {"state": "Maharashtra", "count": 71},
    {"state": "Karnataka", "count": 69},
    {"state": "Uttar Pradesh", "count": 52},
    {"state": "Delhi", "count": 50},
    {"state": "Rajasthan", "count": 46},
    {"state": "Gujarat", "count": 43},
    {"state": "Tamil Nadu", "count": 40},
    {"state": "Telangana", "count": 39},
    {"state": "Andhra Pradesh", "count": 35},
    {"state": "West Bengal", "count": 35},
)

# Fraud vs normal average amount (INR) by age group
# Columns used: sender_age_group, fraud_flag, amount
FRAUD_BY_AGE = (
    {"age": "18-25", "cases": 143, "fraud_amt": 1303.19, "normal_amt": 1194.30},
    {"age": "26-35", "cases": 163, "fraud_amt": 1627.27, "normal_amt": 1325.72},
    {"age": "36-45", "cases": 116, "fraud_amt": 1602.44, "normal_amt": 1423.71},
    {"age": "46-55", "cases": 31, "fraud_amt": 1482.55, "normal_amt": 1332.94},
    {"age": "56+", "cases": 27, "fraud_amt": 1340.30, "normal_amt": 1187.24},
)

# Food & Entertainment average spend by hour, weekday (wd) vs weekend (we)
# Columns used: merchant_category, hour_of_day, is_weekend, amount
SPEND_HOURLY = (
    {"h": "06:00", "food_wd": 548.41, "food_we": 508.45, "ent_wd": 409.36, "ent_we": 386.66},
    {"h": "08:00", "food_wd": 501.30, "food_we": 525.84, "ent_wd": 401.55, "ent_we": 383.97},
    {"h": "10:00", "food_wd": 547.72, "food_we": 511.73, "ent_wd": 406.14, "ent_we": 427.51},
    {"h": "12:00", "food_wd": 552.09, "food_we": 551.00, "ent_wd": 404.70, "ent_we": 427.05},
    {"h": "14:00", "food_wd": 509.21, "food_we": 542.24, "ent_wd": 444.31, "ent_we": 409.40},
    {"h": "16:00", "food_wd": 513.42, "food_we": 519.95, "ent_wd": 413.18, "ent_we": 431.34},
    {"h": "18:00", "food_wd": 539.19, "food_we": 535.06, "ent_wd": 396.57, "ent_we": 430.80},
    {"h": "20:00", "food_wd": 508.76, "food_we": 523.44, "ent_wd": 421.92, "ent_we": 395.18},
    {"h": "22:00", "food_wd": 516.61, "food_we": 524.75, "ent_wd": 412.13, "ent_we": 413.16},
)

SPEND_SUMMARY = {
    "food_weekday_avg": 532,
    "food_weekend_avg": 531,
    "ent_weekday_avg": 414,
    "ent_weekend_avg": 411,
    "food_total_txns": 37464,
    "ent_total_txns": 20103,
}

CHART_DATA = {
    "failure": FAILURE_RATES,
    "fraud_state": FRAUD_BY_STATE,
    "fraud_age": FRAUD_BY_AGE,
    "spending": SPEND_HOURLY,
}
