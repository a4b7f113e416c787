import streamlit as st

from tracker.constants import HAPPINESS_LEVELS
from tracker.formatting import describe_happiness, format_duration, today_iso
from tracker.metrics import average_happiness, total_media_minutes
from tracker.state import entries


def render_header(ctx):
    happiness = entries.get_happiness()
    media = entries.get_media()

    st.title("Happiness Vibe Tracker 🌟")
    st.caption("Track your daily happiness levels")

    cols = st.columns(3)
    cols[0].metric("Days logged", len(happiness))
    avg = average_happiness(happiness)
    cols[1].metric("Average happiness", "-" if avg is None else avg)
    cols[2].metric("Media time", format_duration(total_media_minutes(media)))

    today = today_iso()
    logged_today = next((entry for entry in happiness if entry.date == today), None)
    if logged_today is None:
        st.info(f"No happiness logged for today ({today}) yet.")
    else:
        st.caption(f"Today: {describe_happiness(logged_today.happiness)}")

    with st.expander("Happiness scale"):
        for level, description in sorted(HAPPINESS_LEVELS.items(), reverse=True):
            st.markdown(f"**Level {level}:** {description}")

    if not ctx.durable:
        st.warning("Local storage is unavailable. Entries are kept for this session only.")
    else:
        st.caption(f"Saved to {ctx.storage_label}")
