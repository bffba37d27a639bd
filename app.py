#!/usr/bin/env python3
"""Streamlit web app for the leader rotation matcher."""

import streamlit as st
import pandas as pd
from rotation_matcher import (
    solve_with_restarts,
    count_open_slots,
    parse_slots,
    parse_pool,
    validate_inputs,
)

st.set_page_config(
    page_title="Rotation Matcher",
    page_icon="🗓️",
    layout="wide"
)

st.title("Rotation Matcher")
st.markdown("Fill a repeating rotation with teams so nobody leads twice in a row.")

# Sidebar for parameters
st.sidebar.header("Options")

pause = st.sidebar.number_input(
    "Pause (slots)",
    min_value=0, max_value=10, value=2, step=1,
    help="Minimum number of slots between two appearances of the same leader"
)
n_slots = st.sidebar.number_input(
    "Number of Slots",
    min_value=1, max_value=60, value=6, step=1
)

st.sidebar.header("Solver Settings")
n_restarts = st.sidebar.number_input(
    "Restarts",
    min_value=1, max_value=100, value=10, step=1
)

# Slots
st.header("Slots")
st.markdown("Leave the leaders blank for slots the solver should fill. "
            "Separate co-leaders with commas.")

slots_df = pd.DataFrame({
    "program": [""] * n_slots,
    "leaders": [""] * n_slots,
}, index=[f"Slot {i+1}" for i in range(n_slots)])

edited_slots = st.data_editor(
    slots_df,
    use_container_width=True,
    hide_index=False
)

slots = parse_slots(edited_slots["leaders"].fillna("").tolist())
n_open = count_open_slots(slots)

# Free teams
st.header("Free Teams")
free_text = st.text_area(
    f"One team per line ({n_open} needed)",
    value="",
    height=150
)
pool = parse_pool(free_text.split("\n"))

if len(pool) != n_open:
    st.warning(f"Expected {n_open} teams, got {len(pool)}. Please adjust.")

# Run solver button
st.header("Solve")

if st.button("Find Rotation", type="primary", use_container_width=True):
    try:
        validate_inputs(slots, pool, pause=pause)
    except ValueError as e:
        st.error(str(e))
        st.session_state['has_result'] = False
    else:
        result = solve_with_restarts(slots, pool, pause=pause, n_restarts=n_restarts)
        st.session_state['result'] = result
        st.session_state['has_result'] = True

# Display results
if st.session_state.get('has_result', False):
    best = st.session_state['result']['best']

    st.header("Results")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Status", best['status'])
    with col2:
        st.metric("Attempts", best['attempts'])
    with col3:
        st.metric("Conflicting Slots", best['n_conflicts'])

    if best['status'] != 'Accepted':
        st.warning("No valid rotation found. Try again, add teams or shorten the pause.")

    st.subheader("Rotation")
    schedule_display = best['schedule'].copy()
    schedule_display.insert(1, "program", edited_slots["program"].tolist())
    st.dataframe(schedule_display, use_container_width=True, hide_index=True)

    st.subheader("Leaders")
    rules_df = pd.DataFrame({
        'Leader': list(best['leader_rules'].keys()),
        'Slots': list(best['leader_rules'].values()),
    })
    st.dataframe(rules_df, use_container_width=True, hide_index=True)

    st.subheader("Runs")
    st.dataframe(st.session_state['result']['summary'], use_container_width=True, hide_index=True)
