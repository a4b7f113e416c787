from datetime import date

import streamlit as st

from tracker.constants import DEFAULT_MEDIA_DURATION, DEFAULT_MEDIA_TYPE, MEDIA_TYPE_KEYS
from tracker.formatting import describe_media_type, format_date, format_duration, parse_local_date
from tracker.metrics import media_for_date
from tracker.state import entries
from tracker.state import session_slices as slices
from tracker.tables import media_table_frame
from tracker.validation import create_media_entry

SLICE = "media"


def _table_key():
    return f"media.table.{slices.get_value(SLICE, 'table_version', 0)}"


def _reset_selection():
    slices.set_value(SLICE, "table_version", slices.get_value(SLICE, "table_version", 0) + 1)
    slices.pop_value(SLICE, "confirm_delete")


def _flash(message, saved):
    if not saved:
        message = f"{message} (kept for this session only)"
    slices.set_value(SLICE, "flash", message)


def _clean_title(raw_value):
    title = " ".join(str(raw_value or "").split())
    return title or None


def _media_fields(prefix, entry=None):
    field_cols = st.columns([1.2, 1.2, 1.0])
    with field_cols[0]:
        day = st.date_input(
            "Date",
            value=parse_local_date(entry.date) if entry else date.today(),
            key=f"{prefix}.date",
        )
    with field_cols[1]:
        current_type = entry.type if entry else DEFAULT_MEDIA_TYPE
        media_type = st.selectbox(
            "Media type",
            MEDIA_TYPE_KEYS,
            index=MEDIA_TYPE_KEYS.index(current_type) if current_type in MEDIA_TYPE_KEYS else 0,
            format_func=describe_media_type,
            key=f"{prefix}.type",
        )
    with field_cols[2]:
        duration = st.number_input(
            "Duration (minutes)",
            min_value=1,
            step=5,
            value=entry.duration if entry else DEFAULT_MEDIA_DURATION,
            key=f"{prefix}.duration",
        )
    title = st.text_input("Title", value=(entry.title or "") if entry else "", key=f"{prefix}.title")
    return day, media_type, duration, title


def _render_add_form(store):
    with st.form(key="media.add_form", clear_on_submit=True):
        day, media_type, duration, title = _media_fields("media.add")
        submit = st.form_submit_button("Log media", use_container_width=True)

    if not submit:
        return
    result = create_media_entry(
        day.isoformat() if day else None,
        media_type,
        int(duration) if duration is not None else None,
        title=_clean_title(title),
    )
    if not result.success:
        for error in result.errors:
            st.error(error)
        return
    saved = entries.add_media_entries(store, [result.data])
    _flash("Media entry logged successfully! 🎉", saved)
    _reset_selection()
    st.rerun()


def _render_delete(store, selected):
    pending = slices.get_value(SLICE, "confirm_delete")
    if not pending:
        if st.button(f"Delete selected ({len(selected)})", key="media.delete", disabled=not selected):
            slices.set_value(SLICE, "confirm_delete", [entry.id for entry in selected])
            st.rerun()
        return

    st.warning(f"Delete {len(pending)} media entr{'y' if len(pending) == 1 else 'ies'}? This cannot be undone.")
    confirm_cols = st.columns(2)
    with confirm_cols[0]:
        confirm = st.button("Confirm delete", key="media.delete.confirm", type="primary", use_container_width=True)
    with confirm_cols[1]:
        cancel = st.button("Cancel", key="media.delete.cancel", use_container_width=True)
    if cancel:
        slices.pop_value(SLICE, "confirm_delete")
        st.rerun()
    if confirm:
        saved = entries.delete_media_entries(store, pending)
        _flash(f"Deleted {len(pending)} media entries.", saved)
        _reset_selection()
        st.rerun()


def _render_edit(store, entry):
    prefix = f"media.edit.{entry.id}"
    with st.expander("Edit selected entry", expanded=False):
        with st.form(key=f"{prefix}.form", clear_on_submit=False):
            day, media_type, duration, title = _media_fields(prefix, entry)
            save = st.form_submit_button("Save changes", use_container_width=True)

    if not save:
        return
    result = create_media_entry(
        day.isoformat() if day else None,
        media_type,
        int(duration) if duration is not None else None,
        entry_id=entry.id,
        title=_clean_title(title),
    )
    if not result.success:
        for error in result.errors:
            st.error(error)
        return
    if result.data == entry:
        return
    saved = entries.update_media_entry(store, result.data)
    _flash("Media entry updated.", saved)
    _reset_selection()
    st.rerun()


def _render_day_summary(entry, media):
    day_media = media_for_date(media, entry.date)
    total = sum(item.duration for item in day_media)
    st.markdown(f"**{format_date(entry.date)}**")
    st.caption(f"{len(day_media)} media entries · {format_duration(total)} ({total} min)")


def render_media_tab(ctx):
    store = ctx.store
    flash = slices.pop_value(SLICE, "flash")
    if flash:
        st.success(flash)

    _render_add_form(store)

    media = entries.get_media()
    st.markdown("#### Media log")
    if not media:
        st.caption("No media entries yet.")
        return

    event = st.dataframe(
        media_table_frame(media),
        use_container_width=True,
        hide_index=True,
        column_config={"id": None, "Minutes": None},
        on_select="rerun",
        selection_mode="multi-row",
        key=_table_key(),
    )
    rows = [row for row in event.selection.rows if 0 <= row < len(media)]
    selected = [media[row] for row in rows]
    st.caption(f"{len(media)} total entries • {len(selected)} selected")

    _render_delete(store, selected)
    if len(selected) == 1:
        _render_edit(store, selected[0])
        _render_day_summary(selected[0], media)
