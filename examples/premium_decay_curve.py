# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#       jupytext_version: 1.17.2
#   kernelspec:
#     display_name: Python 3 (ipykernel)
#     language: python
#     name: python3
# ---

import sys
import os
import plotly.graph_objects as go

# %%
# Add the src directory to the Python path
this_notebook_dir = os.getcwd()  # Get current working directory
sys.path.append(os.path.abspath(os.path.join(this_notebook_dir, "..", "src")))

from ens_pricing.domain.premium.premium_schedule import premium_schedule  # noqa: E402
from ens_pricing.domain.time.duration import ONE_HOUR  # noqa: E402
from ens_pricing.domain.time.timestamp import Timestamp  # noqa: E402


# %%
def premium_chart(df, log_scale=False):
    # Premium (USD) over time since release
    fig = (
        go.Figure()
        .add_trace(
            go.Scatter(
                x=df["dt"],
                y=df["premium"],
                text=df["display"],
                hovertemplate="%{x}<br>%{text}<extra></extra>",
                mode="lines",
                name="Temporary premium",
                line=dict(color="blue", width=1),
            ),
        )
        .update_layout(title="Temporary Premium Decay", xaxis_title="Time (UTC)", yaxis_title="Premium (USD)", template="plotly_white")
    )
    if log_scale:
        fig.update_yaxes(type="log")

    return fig


# %%
# Name expired on 2023-11-14 22:13:20 UTC
expiration = Timestamp(1_700_000_000)
df = premium_schedule(expiration, step=ONE_HOUR)
df.head()

# %%
premium_chart(df).show()

# %%
# Last hourly sample is $0.00, which has no place on a log axis
premium_chart(df[df["premium_value"] > 0], log_scale=True).show()
