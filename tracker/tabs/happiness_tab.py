from datetime import date

import streamlit as st

from tracker.constants import HAPPINESS_MAX, HAPPINESS_MIN
from tracker.formatting import describe_happiness, describe_media_type, format_date, format_duration, parse_local_date
from tracker.metrics import media_for_date
from tracker.state import entries
from tracker.state import session_slices as slices
from tracker.tables import happiness_table_frame
from tracker.validation import create_happiness_entry

SLICE = "happiness"


def _table_key():
    return f"happiness.table.{slices.get_value(SLICE, 'table_version', 0)}"


def _reset_selection():
    slices.set_value(SLICE, "table_version", slices.get_value(SLICE, "table_version", 0) + 1)
    slices.pop_value(SLICE, "confirm_delete")


def _flash(message, saved):
    if not saved:
        message = f"{message} (kept for this session only)"
    slices.set_value(SLICE, "flash", message)


def _render_add_form(store):
    with st.form(key="happiness.add_form", clear_on_submit=True):
        form_cols = st.columns([1.2, 1.8])
        with form_cols[0]:
            day = st.date_input("Date", value=date.today(), key="happiness.add.date")
        with form_cols[1]:
            level = st.slider(
                "Happiness",
                min_value=HAPPINESS_MIN,
                max_value=HAPPINESS_MAX,
                value=0,
                step=1,
                key="happiness.add.level",
            )
        submit = st.form_submit_button("Log happiness", use_container_width=True)

    if not submit:
        return
    result = create_happiness_entry(day.isoformat() if day else None, level)
    if not result.success:
        for error in result.errors:
            st.error(error)
        return
    saved = entries.add_happiness_entry(store, result.data)
    _flash(f"Happiness entry logged for {result.data.date}! 🎉", saved)
    _reset_selection()
    st.rerun()


def _render_delete(store, selected):
    pending = slices.get_value(SLICE, "confirm_delete")
    if not pending:
        if st.button(f"Delete selected ({len(selected)})", key="happiness.delete", disabled=not selected):
            slices.set_value(SLICE, "confirm_delete", [entry.key for entry in selected])
            st.rerun()
        return

    st.warning(f"Delete {len(pending)} happiness entr{'y' if len(pending) == 1 else 'ies'}? This cannot be undone.")
    confirm_cols = st.columns(2)
    with confirm_cols[0]:
        confirm = st.button("Confirm delete", key="happiness.delete.confirm", type="primary", use_container_width=True)
    with confirm_cols[1]:
        cancel = st.button("Cancel", key="happiness.delete.cancel", use_container_width=True)
    if cancel:
        slices.pop_value(SLICE, "confirm_delete")
        st.rerun()
    if confirm:
        keys = {tuple(key) for key in pending}
        doomed = [entry for entry in entries.get_happiness() if entry.key in keys]
        saved = entries.delete_happiness_entries(store, doomed)
        _flash(f"Deleted {len(doomed)} happiness entries.", saved)
        _reset_selection()
        st.rerun()


def _render_edit(store, entry):
    with st.expander("Edit selected entry", expanded=False):
        with st.form(key=f"happiness.edit_form.{entry.date}", clear_on_submit=False):
            edit_cols = st.columns([1.2, 1.8])
            with edit_cols[0]:
                new_day = st.date_input("Date", value=parse_local_date(entry.date), key=f"happiness.edit.date.{entry.date}")
            with edit_cols[1]:
                new_level = st.slider(
                    "Happiness",
                    min_value=HAPPINESS_MIN,
                    max_value=HAPPINESS_MAX,
                    value=entry.happiness,
                    step=1,
                    key=f"happiness.edit.level.{entry.date}",
                )
            save = st.form_submit_button("Save changes", use_container_width=True)

    if not save:
        return
    result = create_happiness_entry(new_day.isoformat() if new_day else None, new_level)
    if not result.success:
        for error in result.errors:
            st.error(error)
        return
    if result.data == entry:
        return
    saved = entries.update_happiness_entry(store, entry, result.data)
    _flash(f"Updated entry for {result.data.date}.", saved)
    _reset_selection()
    st.rerun()


def _render_detail(entry, media):
    day_media = media_for_date(media, entry.date)
    st.markdown(f"**{format_date(entry.date)}**")
    st.markdown(f"{entry.happiness} · {describe_happiness(entry.happiness)}")
    if not day_media:
        st.caption("No media entries found for this date.")
        return
    total = sum(item.duration for item in day_media)
    st.caption(f"Media time: {format_duration(total)} ({total} min)")
    for item in day_media:
        label = describe_media_type(item.type)
        title = f" · {item.title}" if item.title else ""
        st.markdown(f"- {label}{title} · {format_duration(item.duration)}")


def render_happiness_tab(ctx):
    store = ctx.store
    flash = slices.pop_value(SLICE, "flash")
    if flash:
        st.success(flash)

    _render_add_form(store)

    happiness = entries.get_happiness()
    media = entries.get_media()
    st.markdown("#### Entries")
    if not happiness:
        st.caption("No happiness entries yet.")
        return

    frame = happiness_table_frame(happiness, media)
    event = st.dataframe(
        frame.drop(columns=["Media minutes"]),
        use_container_width=True,
        hide_index=True,
        on_select="rerun",
        selection_mode="multi-row",
        key=_table_key(),
    )
    rows = [row for row in event.selection.rows if 0 <= row < len(happiness)]
    selected = [happiness[row] for row in rows]
    st.caption(f"{len(happiness)} total entries • {len(selected)} selected")

    _render_delete(store, selected)
    if len(selected) == 1:
        _render_edit(store, selected[0])
        _render_detail(selected[0], media)
