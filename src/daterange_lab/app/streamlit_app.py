"""Streamlit application for Date Range Lab."""

import logging
from datetime import date

import pandas as pd
import streamlit as st

from daterange_lab.app.ui import render_month_table, render_range_caption
from daterange_lab.chrono import DateRange, UnknownZoneError, end_of_day, localize, start_of_day, to_local
from daterange_lab.config import ZONE_CHOICES, PickerConfig
from daterange_lab.features import build_month_grid
from daterange_lab.humanize import range_label
from daterange_lab.report import selection_to_json
from daterange_lab.rules import PREDEFINED_LABELS, eligible, eligible_session, find_predefined

logger = logging.getLogger("daterange_lab")

CUSTOM_RANGE = "Custom"


def get_config() -> PickerConfig:
    """Return the current picker config from the session."""
    if "picker_config" not in st.session_state:
        st.session_state["picker_config"] = PickerConfig()
    return st.session_state["picker_config"]


def dates_to_selection(zone: str, picked) -> tuple[DateRange | None, pd.Timestamp | None]:
    """Convert ``st.date_input`` output into (selection, anchor).

    A complete pick covers whole local days. A single picked date is an
    in-progress selection and becomes the anchor.

    Args:
        zone: Picker zone.
        picked: A date, or a tuple of zero, one or two dates.

    Returns:
        Tuple of (selection or None, anchor or None).
    """
    if isinstance(picked, date):
        picked = (picked,)
    picked = tuple(picked or ())

    instants = [localize(zone, pd.Timestamp(d)) for d in picked]

    if len(instants) == 2:
        begin, end = instants
        return DateRange.of(zone, start_of_day(zone, begin), end_of_day(zone, end)), None
    if len(instants) == 1:
        return None, start_of_day(zone, instants[0])
    return None, None


def check_selection(config: PickerConfig, selection: DateRange) -> list[str]:
    """Return warnings for range endpoints the picker would not allow."""
    zone = config.zone

    def can_pick(day, anchor=None) -> bool:
        if config.exclude_holidays:
            return eligible_session(zone, day, anchor, config.calendar)
        return eligible(zone, day, anchor)

    warnings = []
    begin, end = selection.begins_at, selection.ends_at
    if not can_pick(begin):
        warnings.append(f"{begin.strftime('%a %b %d, %Y')} cannot be picked as a start day.")
    if not can_pick(start_of_day(zone, end), anchor=start_of_day(zone, begin)):
        warnings.append(
            f"{end.strftime('%a %b %d, %Y')} cannot be picked as an end day "
            "(weekend, holiday or more than a year after the start)."
        )
    return warnings


def render_config_form(config: PickerConfig) -> None:
    """Render the sidebar configuration form.

    On submit the session config is replaced by a new value and the page reruns.
    """
    with st.sidebar.form("picker_config_form"):
        st.subheader("Picker Options")
        zone = st.selectbox(
            "Timezone",
            ZONE_CHOICES,
            index=ZONE_CHOICES.index(config.zone) if config.zone in ZONE_CHOICES else 0,
        )
        show_predefined_ranges = st.checkbox("Show quick picks", value=config.show_predefined_ranges)
        show_day_labels = st.checkbox("Show day offsets", value=config.show_day_labels)
        show_range_label = st.checkbox("Show range caption", value=config.show_range_label)
        exclude_holidays = st.checkbox(
            f"Disable exchange holidays ({config.calendar})",
            value=config.exclude_holidays,
        )
        submitted = st.form_submit_button("Apply")

    if submitted:
        try:
            new_config = config.with_changes(
                zone=zone,
                show_predefined_ranges=show_predefined_ranges,
                show_day_labels=show_day_labels,
                show_range_label=show_range_label,
                exclude_holidays=exclude_holidays,
            )
        except UnknownZoneError as e:
            st.sidebar.error(str(e))
            return

        if new_config != config:
            logger.info(f"Picker config changed: {new_config.to_dict()}")
            st.session_state["picker_config"] = new_config
            st.rerun()


def render_picker(config: PickerConfig, today: pd.Timestamp) -> None:
    """Render the picker: quick picks, date input, caption, calendar and export."""
    zone = config.zone
    selection, anchor = None, None

    choice = CUSTOM_RANGE
    if config.show_predefined_ranges:
        choice = st.selectbox("Quick pick", [CUSTOM_RANGE, *PREDEFINED_LABELS])

    if choice == CUSTOM_RANGE:
        local_today = to_local(zone, today).date()
        picked = st.date_input(
            f"Date range ({zone})",
            value=(local_today, local_today),
        )
        selection, anchor = dates_to_selection(zone, picked)
    else:
        selection = find_predefined(zone, today, choice)

    if selection is not None:
        for warning in check_selection(config, selection):
            st.warning(warning)
        if config.show_range_label:
            render_range_caption(range_label(zone, today, selection), selection.begins_at, selection.ends_at)
    elif anchor is not None:
        st.info("Pick an end day to complete the range.")

    grid = build_month_grid(
        zone,
        today,
        month_of=selection.begins_at if selection is not None else anchor,
        anchor=anchor,
        selection=selection,
        exclude_holidays=config.exclude_holidays,
        calendar=config.calendar,
    )
    anchor_date = to_local(zone, anchor).strftime("%Y-%m-%d") if anchor is not None else None
    st.markdown(render_month_table(grid, config.show_day_labels, anchor_date), unsafe_allow_html=True)

    if selection is not None:
        st.markdown("---")
        st.subheader("Selection")
        st.json(selection.to_record())
        st.download_button(
            "Download selection (JSON)",
            data=selection_to_json(selection),
            file_name="selection.json",
            mime="application/json",
        )


def main():
    st.set_page_config(
        page_title="Date Range Lab",
        page_icon="📅",
        layout="wide",
    )

    st.title("📅 Date Range Lab")
    st.caption("Date-range picker wired to a live configuration form")

    config = get_config()
    render_config_form(config)

    with st.sidebar.expander("Current config"):
        st.json(config.to_dict())

    # The clock is read here only; everything below receives today explicitly.
    today = to_local(config.zone, pd.Timestamp.now(tz="UTC"))
    render_picker(config, today)


if __name__ == "__main__":
    main()
