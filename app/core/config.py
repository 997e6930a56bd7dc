import os

# -----------------------------
# APP CONFIG
# -----------------------------
APP_TITLE = "PayInsight AI"
HOST = os.getenv("PAYINSIGHT_HOST", "0.0.0.0")
PORT = int(os.getenv("PAYINSIGHT_PORT", "8001"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("PAYINSIGHT_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# -----------------------------
# CHAT
# -----------------------------
# "Typing" pause before an answer is shown, in seconds
QUERY_DELAY_SECONDS = float(os.getenv("PAYINSIGHT_QUERY_DELAY", "0.8"))
UPLOAD_DELAY_SECONDS = float(os.getenv("PAYINSIGHT_UPLOAD_DELAY", "1.2"))
ALLOWED_UPLOAD_EXTENSION = ".csv"

# -----------------------------
# CSV ANALYZER
# -----------------------------
MONEY_COLUMN_PATTERN = r"amount|price|cost|revenue|salary|spend|fee|total"
NUMERIC_MAJORITY = 0.5
OUTLIER_SIGMA = 2
TOP_CATEGORY_LIMIT = 5

# -----------------------------
# CHARTS
# -----------------------------
CHART_DPI = 150
