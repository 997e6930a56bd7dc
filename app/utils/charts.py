import matplotlib
matplotlib.use('Agg')

import io

import pandas as pd
import seaborn as sns
import matplotlib.pyplot as plt

from app.core.config import CHART_DPI
from app.data.transaction_data import CHART_DATA

sns.set_theme(style="whitegrid", font_scale=1.1)
plt.rcParams["figure.autolayout"] = True

DEVICE_COLORS = {"Android": "#10b981", "iOS": "#6366f1", "Web": "#f59e0b"}
NETWORK_ORDER = ["WiFi", "5G", "4G", "3G"]


# ======================================================
# FIGURE TO PNG
# ======================================================
def fig_to_png(fig):
    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=CHART_DPI, bbox_inches='tight')
    plt.close(fig)
    return buf.getvalue()


# ======================================================
# DEVICE x NETWORK FAILURE RATES
# ======================================================
def failure_chart(data):
    df = pd.DataFrame(data)

    fig, ax = plt.subplots(figsize=(8, 4))
    sns.barplot(
        data=df, x="network", y="rate", hue="device",
        order=NETWORK_ORDER, hue_order=list(DEVICE_COLORS),
        palette=DEVICE_COLORS, ax=ax,
    )
    ax.set_ylim(0, 10)
    ax.set_xlabel("")
    ax.set_ylabel("Failure Rate (%)")
    ax.set_title("Peak Evening Failure Rate by Device & Network")
    return fig


# ======================================================
# FRAUD CASES BY STATE
# ======================================================
def fraud_state_chart(data):
    df = pd.DataFrame(data)
    # Top two states red, next three amber, the rest indigo
    colors = ["#ef4444" if i < 2 else "#f59e0b" if i < 5 else "#6366f1" for i in range(len(df))]

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.barh(df["state"], df["count"], color=colors)
    ax.invert_yaxis()
    ax.set_xlabel("Fraud Cases")
    ax.set_title("Fraud Cases by State")
    return fig


# ======================================================
# FRAUD vs NORMAL AMOUNT BY AGE
# ======================================================
def fraud_age_chart(data):
    df = pd.DataFrame(data).melt(
        id_vars="age",
        value_vars=["fraud_amt", "normal_amt"],
        var_name="kind",
        value_name="amount",
    )
    df["kind"] = df["kind"].map({"fraud_amt": "Fraud Avg ₹", "normal_amt": "Normal Avg ₹"})

    fig, ax = plt.subplots(figsize=(8, 4))
    sns.barplot(
        data=df, x="age", y="amount", hue="kind",
        palette=["#ef4444", "#10b981"], ax=ax,
    )
    ax.set_ylim(900, 1800)
    ax.set_xlabel("Age Group")
    ax.set_ylabel("Average Amount (₹)")
    ax.set_title("Fraud vs Normal Transaction Amount by Age Group")
    ax.legend(title="")
    return fig


# ======================================================
# HOURLY SPEND
# ======================================================
def spending_chart(data):
    df = pd.DataFrame(data)
    lines = [
        ("food_wd", "Food Weekday", "#f59e0b", "-"),
        ("food_we", "Food Weekend", "#fb923c", "--"),
        ("ent_wd", "Entertainment Weekday", "#6366f1", "-"),
        ("ent_we", "Entertainment Weekend", "#a78bfa", "--"),
    ]

    fig, ax = plt.subplots(figsize=(9, 4))
    for col, label, color, style in lines:
        ax.plot(df["h"], df[col], label=label, color=color, linestyle=style, linewidth=2)
    ax.set_ylim(300, 620)
    ax.set_ylabel("Average Spend (₹)")
    ax.set_title("Food & Entertainment Spend by Hour")
    ax.legend(fontsize=9)
    return fig


CHART_BUILDERS = {
    "failure": failure_chart,
    "fraud_state": fraud_state_chart,
    "fraud_age": fraud_age_chart,
    "spending": spending_chart,
}


def render_chart(chart_key):
    """Render the chart behind a chart key as PNG bytes. Raises KeyError for unknown keys."""
    builder = CHART_BUILDERS[chart_key]
    fig = builder(CHART_DATA[chart_key])
    return fig_to_png(fig)
