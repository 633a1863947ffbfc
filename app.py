import math
from datetime import datetime

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from estimator.app_state import AppState
from estimator.comparison import (
    compare_metrics,
    comparison_summary,
    parameter_differences,
    percent_difference,
    projection_comparison,
)
from estimator.defaults import (
    CONVERSION_GROWTH_DEFAULTS,
    DEFAULT_CURRENCY,
    DEFAULT_SCENARIO_INPUTS,
    FOOD_BUNDLE_DEFAULTS,
    KPI_CURRENCY,
    KPI_DEFAULTS,
)
from estimator.food_bundle import (
    bundle_adoption_curve,
    conversion_growth_projection,
    conversion_split,
    minimum_adoption_for_profit,
)
from estimator.formatting import format_currency, format_number, format_percent
from estimator.input_metadata import INPUT_GUIDANCE, advisory_warnings, clamp_inputs, help_with_guidance
from estimator.integrity_checks import run_integrity_checks
from estimator.kpis import KpiInputs, bound_footfall, compare_kpis, compute_kpi_revenue
from estimator.metrics import (
    capacity_split,
    compute_metrics,
    horizon_table,
    metrics_frame,
    revenue_factors,
    revenue_projection,
    target_capacity,
    utilization_band,
)
from estimator.persistence import (
    MODE_COMPARING,
    ScenarioStore,
    configure_storage_root,
    export_scenarios_json,
    parse_import_json,
    storage_root_path,
)
from estimator.runtime_logging import (
    append_runtime_event,
    clear_runtime_events,
    configure_log_root,
    install_global_exception_logging,
    read_runtime_events,
    runtime_log_path,
)
from estimator.schema import INPUT_FIELDS
from estimator.sensitivity import (
    DEFAULT_SENSITIVITY_DRIVERS,
    TARGET_OPTIONS,
    available_sensitivity_drivers,
    run_one_way_sensitivity,
    tornado_frame,
)


install_global_exception_logging()


PAGES = ["Revenue Estimator", "Food Bundle", "KPIs"]

UI_DEFAULTS = {
    "page": PAGES[0],
    "new_scenario_name": "",
    "sensitivity_delta": 0.1,
    "sensitivity_target": TARGET_OPTIONS[0],
    "sensitivity_drivers": list(DEFAULT_SENSITIVITY_DRIVERS),
    "runtime_log_limit": 100,
    "storage_custom_path": "",
}

SCENARIO_A_COLOR = "#10b981"
SCENARIO_B_COLOR = "#3b82f6"


def _scenario_input_format(key: str) -> str:
    return "%.1f" if key == "session_duration" else "%.0f"


def _input_bounds(key: str) -> tuple[float, float | None]:
    if key == "hours_per_day":
        return 1.0, 24.0
    if key == "utilization_rate":
        return 1.0, 100.0
    return 0.0, None


def _write_inputs_to_state(values: dict) -> None:
    clamped, _ = clamp_inputs(values)
    for key in INPUT_FIELDS:
        st.session_state[key] = float(clamped[key])


def _inputs_from_state() -> dict:
    return {k: st.session_state.get(k, v) for k, v in DEFAULT_SCENARIO_INPUTS.items()}


def _store() -> ScenarioStore:
    return st.session_state["scenario_store"]


def _app_state() -> AppState:
    return st.session_state["app_state"]


def _on_reset_defaults() -> None:
    _app_state().reset_to_defaults()
    _write_inputs_to_state(DEFAULT_SCENARIO_INPUTS)


def _on_open_save_dialog() -> None:
    _app_state().open_save_dialog()


def _on_cancel_save_dialog() -> None:
    _app_state().cancel_save_dialog()
    st.session_state["new_scenario_name"] = ""


def _on_confirm_save() -> None:
    state = _app_state()
    state.update_inputs(**clamp_inputs(_inputs_from_state())[0])
    name = st.session_state.get("new_scenario_name", "")
    saved = state.save_current(_store(), name=name)
    if saved is None:
        return
    st.session_state["new_scenario_name"] = ""
    append_runtime_event(
        level="INFO",
        event="scenario_saved",
        message="Scenario saved.",
        context={"scenario_id": saved.id, "name": saved.name},
    )


def _on_load_scenario(scenario_id: str) -> None:
    scenario = _store().find_by_id(scenario_id)
    if scenario is None:
        append_runtime_event(
            level="WARNING",
            event="load_scenario_missing",
            message="Saved scenario not found.",
            context={"scenario_id": scenario_id},
        )
        return
    _app_state().load_scenario(scenario)
    _write_inputs_to_state(scenario.inputs())


def _on_compare_scenario(scenario_id: str) -> None:
    if not _store().select_for_comparison(scenario_id):
        append_runtime_event(
            level="WARNING",
            event="compare_scenario_missing",
            message="Saved scenario not found for comparison.",
            context={"scenario_id": scenario_id},
        )


def _on_delete_scenario(scenario_id: str) -> None:
    if _store().delete(scenario_id):
        append_runtime_event(
            level="INFO",
            event="scenario_deleted",
            message="Scenario deleted.",
            context={"scenario_id": scenario_id},
        )


def _on_exit_comparison() -> None:
    _store().exit_comparison()


def _on_load_comparison_into_current() -> None:
    scenario = _store().comparison_scenario()
    if scenario is not None:
        _app_state().load_scenario(scenario)
        _write_inputs_to_state(scenario.inputs())
        _store().exit_comparison()


def _metric_delta(base: float, other: float | None) -> str | None:
    if other is None:
        return None
    return percent_difference(base, other)


def _money_axis(fig: go.Figure) -> go.Figure:
    fig.update_yaxes(tickprefix="$", tickformat=",.0f")
    return fig


def _format_frame_money(df: pd.DataFrame, cols: list[str], currency: str = DEFAULT_CURRENCY) -> pd.DataFrame:
    out = df.copy()
    for col in cols:
        if col in out.columns:
            out[col] = out[col].map(lambda v: format_currency(v, currency))
    return out


st.set_page_config(page_title="Revenue Estimator", layout="wide")

for k, v in UI_DEFAULTS.items():
    st.session_state.setdefault(k, v)
for k, v in FOOD_BUNDLE_DEFAULTS.items():
    st.session_state.setdefault(f"fb_{k}", v)
for k, v in CONVERSION_GROWTH_DEFAULTS.items():
    st.session_state.setdefault(f"cg_{k}", v)
for prefix in ("kpi_current", "kpi_potential"):
    for k, v in KPI_DEFAULTS.items():
        st.session_state.setdefault(f"{prefix}_{k}", float(v))
if "app_state" not in st.session_state:
    st.session_state["app_state"] = AppState()
# Input widget keys are dropped while another page is shown; restore them from the held scenario.
for k in INPUT_FIELDS:
    st.session_state.setdefault(k, float(getattr(st.session_state["app_state"].current, k)))
if "scenario_store" not in st.session_state:
    store = ScenarioStore()
    store.load()
    st.session_state["scenario_store"] = store

with st.sidebar:
    st.header("Calculators")
    st.radio("Page", PAGES, key="page", help="Choose which calculator to display.")


def render_revenue_estimator() -> None:
    state = _app_state()
    store = _store()

    with st.sidebar:
        st.header("Input Parameters")
        for key in INPUT_FIELDS:
            g = INPUT_GUIDANCE[key]
            lo, hi = _input_bounds(key)
            st.number_input(
                g["label"],
                min_value=lo,
                max_value=hi,
                step=float(g["step"]),
                format=_scenario_input_format(key),
                key=key,
                help=help_with_guidance(key),
            )
        st.button("Reset to Defaults", on_click=_on_reset_defaults, help="Restore the default input values.")

    values, clamp_warnings = clamp_inputs(_inputs_from_state())
    state.update_inputs(**values)
    current = state.current
    current_metrics = compute_metrics(current)

    comparison = store.comparison_scenario()
    comparing = store.mode == MODE_COMPARING
    comparison_metrics = compute_metrics(comparison) if comparison is not None else None

    st.title("Revenue Estimator")
    st.caption("Calculate your potential revenue based on key business metrics.")
    if comparing and comparison is not None:
        st.subheader(f"Comparing Scenarios: {current.name} vs {comparison.name}")
    else:
        st.subheader(f"Scenario: {current.name}")

    with st.sidebar:
        st.header("Scenario Manager")
        st.button("Save Scenario", on_click=_on_open_save_dialog, help="Save the current inputs as a named scenario.")
        if state.save_dialog_open:
            st.text_input(
                "Scenario Name",
                key="new_scenario_name",
                placeholder="e.g., Increased Capacity",
                help="Give this scenario a name to identify it later.",
            )
            s1, s2 = st.columns(2)
            s1.button("Confirm Save", type="primary", on_click=_on_confirm_save, help="Store the scenario locally.")
            s2.button("Cancel", on_click=_on_cancel_save_dialog, help="Close without saving.")
            if not st.session_state.get("new_scenario_name", "").strip():
                st.caption("Enter a name to save this scenario.")

        st.subheader("Saved Scenarios")
        saved = store.scenarios
        if not saved:
            st.caption("No saved scenarios yet. Save your current scenario to compare later.")
        for scenario in saved:
            daily = compute_metrics(scenario).daily_revenue
            with st.container(border=True):
                st.markdown(f"**{scenario.name}**")
                st.caption(f"{scenario.created_at.strftime('%Y-%m-%d')} | {format_currency(daily)}/day")
                b1, b2, b3 = st.columns(3)
                b1.button(
                    "Load",
                    key=f"load_{scenario.id}",
                    on_click=_on_load_scenario,
                    args=(scenario.id,),
                    help="Load this scenario into the inputs.",
                )
                b2.button(
                    "Compare",
                    key=f"compare_{scenario.id}",
                    on_click=_on_compare_scenario,
                    args=(scenario.id,),
                    help="Show this scenario side by side with the current one.",
                )
                b3.button(
                    "Delete",
                    key=f"delete_{scenario.id}",
                    on_click=_on_delete_scenario,
                    args=(scenario.id,),
                    help="Remove this scenario from local storage.",
                )
        if comparing:
            st.button("Exit Comparison", on_click=_on_exit_comparison, help="Return to the single-scenario view.")

    for msg in clamp_warnings:
        st.warning(msg)

    st.markdown("### Revenue Projections")
    other = comparison_metrics
    c1, c2, c3 = st.columns(3)
    c1.metric(
        "Daily",
        format_currency(current_metrics.daily_revenue),
        _metric_delta(current_metrics.daily_revenue, other.daily_revenue if other else None),
    )
    c1.caption(f"Hourly: {format_currency(current_metrics.hourly_revenue)}")
    c2.metric(
        "Monthly",
        format_currency(current_metrics.monthly_revenue),
        _metric_delta(current_metrics.monthly_revenue, other.monthly_revenue if other else None),
    )
    c2.caption("(30 days)")
    c3.metric(
        "Annual",
        format_currency(current_metrics.annual_revenue),
        _metric_delta(current_metrics.annual_revenue, other.annual_revenue if other else None),
    )
    c3.caption("(365 days)")

    tabs = ["Projections", "Capacity Analysis", "Revenue Factors", "Sensitivity"]
    if comparing:
        tabs.append("Comparison")
    tab_objs = st.tabs(tabs)

    with tab_objs[0]:
        if comparing and other is not None:
            horizon = horizon_table(current_metrics).rename(columns={"Revenue": "Scenario A"})
            horizon["Scenario B"] = horizon_table(other)["Revenue"]
            bars = horizon.melt("Horizon", var_name="Scenario", value_name="Revenue")
            fig = px.bar(bars, x="Horizon", y="Revenue", color="Scenario", barmode="group", title="Revenue by Horizon")
            st.plotly_chart(_money_axis(fig), width="stretch")

            proj = projection_comparison(current_metrics, other).melt("Period", var_name="Scenario", value_name="Revenue")
            fig = px.line(proj, x="Period", y="Revenue", color="Scenario", markers=True, title="Revenue Growth Projection")
            st.plotly_chart(_money_axis(fig), width="stretch")
        else:
            fig = px.bar(horizon_table(current_metrics), x="Horizon", y="Revenue", title="Revenue by Horizon")
            st.plotly_chart(_money_axis(fig), width="stretch")
            proj = revenue_projection(current_metrics)
            fig = px.line(proj, x="Period", y="Revenue", markers=True, title="Revenue Growth Projection")
            st.plotly_chart(_money_axis(fig), width="stretch")

    with tab_objs[1]:
        util = current_metrics.capacity_utilization
        u1, u2 = st.columns(2)
        u1.metric(
            "Current Utilization",
            format_percent(util),
            _metric_delta(util, other.capacity_utilization if other else None),
        )
        bar_value = min(max(util, 0.0), 100.0) if math.isfinite(util) else 0.0
        u1.progress(int(bar_value), text=f"Utilization band: {utilization_band(util)}")
        u2.metric(
            "Current Capacity",
            f"{format_number(current_metrics.current_capacity)} customers/hour",
            _metric_delta(current_metrics.current_capacity, other.current_capacity if other else None),
        )

        p1, p2 = st.columns(2)
        split = capacity_split(current, current_metrics)
        fig = px.pie(
            split,
            names="Segment",
            values="Customers per Hour",
            hole=0.6,
            title="Capacity Utilization",
            color_discrete_sequence=[SCENARIO_B_COLOR, "#e5e7eb"],
        )
        p1.plotly_chart(fig, width="stretch")

        cvp = pd.DataFrame(
            [
                {"Case": "Current", "Scenario": "Scenario A", "Revenue": current_metrics.daily_revenue},
                {"Case": "Potential", "Scenario": "Scenario A", "Revenue": current_metrics.potential_revenue},
            ]
        )
        if other is not None:
            cvp = pd.concat(
                [
                    cvp,
                    pd.DataFrame(
                        [
                            {"Case": "Current", "Scenario": "Scenario B", "Revenue": other.daily_revenue},
                            {"Case": "Potential", "Scenario": "Scenario B", "Revenue": other.potential_revenue},
                        ]
                    ),
                ],
                ignore_index=True,
            )
        fig = px.bar(
            cvp,
            x="Case",
            y="Revenue",
            color="Scenario",
            barmode="group",
            title="Current vs Potential Revenue",
            color_discrete_sequence=[SCENARIO_A_COLOR, SCENARIO_B_COLOR],
        )
        p2.plotly_chart(_money_axis(fig), width="stretch")

        t1, t2 = st.columns(2)
        t1.metric(
            f"Target Capacity at {current.utilization_rate:.0f}% Utilization",
            f"{format_number(target_capacity(current))} customers/hour",
            _metric_delta(target_capacity(current), target_capacity(comparison) if comparison else None),
        )
        t2.metric(
            "Potential Daily Revenue",
            format_currency(current_metrics.potential_revenue),
            _metric_delta(current_metrics.potential_revenue, other.potential_revenue if other else None),
        )

    with tab_objs[2]:
        factors = revenue_factors(current, current_metrics).melt("Case", var_name="Factor", value_name="Revenue")
        fig = px.bar(factors, x="Case", y="Revenue", color="Factor", barmode="group", title="Revenue Factors Analysis")
        st.plotly_chart(_money_axis(fig), width="stretch")
        st.dataframe(metrics_frame(current_metrics), width="stretch", hide_index=True)

    with tab_objs[3]:
        s1, s2 = st.columns(2)
        s1.slider(
            "Sensitivity step",
            min_value=0.01,
            max_value=0.5,
            step=0.01,
            key="sensitivity_delta",
            help="Fractional change applied to each input for the low and high cases.",
        )
        s2.selectbox(
            "Target metric",
            TARGET_OPTIONS,
            key="sensitivity_target",
            help="Output metric used to rank the revenue drivers.",
        )
        st.multiselect(
            "Drivers",
            available_sensitivity_drivers(),
            key="sensitivity_drivers",
            format_func=lambda k: INPUT_GUIDANCE[k]["label"],
            help="Inputs varied one at a time. ARPU is not offered because no metric depends on it.",
        )
        sens_df = run_one_way_sensitivity(
            current,
            float(st.session_state["sensitivity_delta"]),
            drivers=list(st.session_state["sensitivity_drivers"]),
        )
        tornado = tornado_frame(sens_df, st.session_state["sensitivity_target"])
        if tornado.empty:
            st.info("No sensitivity results for the current inputs.")
        else:
            fig = go.Figure()
            fig.add_trace(go.Bar(y=tornado["Driver Label"], x=tornado["Low"], name="Low", orientation="h"))
            fig.add_trace(go.Bar(y=tornado["Driver Label"], x=tornado["High"], name="High", orientation="h"))
            fig.update_layout(barmode="overlay", title=f"Change in {st.session_state['sensitivity_target']}")
            st.plotly_chart(fig, width="stretch")
        with st.expander("Sensitivity Table", expanded=False):
            st.dataframe(sens_df, width="stretch", hide_index=True)

    if comparing and comparison is not None and other is not None:
        with tab_objs[4]:
            st.markdown(f"**Scenario A:** {current.name}  \n**Scenario B:** {comparison.name}")
            st.button(
                "Load This Scenario",
                on_click=_on_load_comparison_into_current,
                help="Replace the current inputs with Scenario B.",
            )
            for line in comparison_summary(current, comparison):
                st.write(f"- {line}")
            diff_params = parameter_differences(current, comparison)
            st.caption("Parameter differences")
            if diff_params.empty:
                st.caption("Both scenarios use identical inputs.")
            else:
                st.dataframe(diff_params, width="stretch", hide_index=True)
            st.caption("Metric comparison")
            st.dataframe(compare_metrics(current_metrics, other), width="stretch", hide_index=True)

    _render_diagnostics(current, current_metrics)


def _render_diagnostics(current, current_metrics) -> None:
    store = _store()
    with st.expander("Diagnostics and Storage", expanded=False):
        advisories = advisory_warnings(current.inputs())
        findings = run_integrity_checks(current, current_metrics)
        if advisories:
            st.caption("Inputs outside the slider ranges")
            for msg in advisories:
                st.write(f"- {msg}")
        if findings:
            st.caption("Metric checks")
            st.dataframe(pd.DataFrame(findings), width="stretch", hide_index=True)
        else:
            st.caption("All metric identity checks passed.")

        st.caption(f"Storage folder: `{storage_root_path()}`")
        st.text_input(
            "Custom Storage Folder",
            key="storage_custom_path",
            help="Folder used for saved scenarios and the runtime log. Leave blank for the default.",
        )
        if st.button("Apply Storage Location", help="Switch storage folder and reload saved scenarios."):
            root = configure_storage_root(st.session_state["storage_custom_path"])
            configure_log_root(st.session_state["storage_custom_path"])
            store.exit_comparison()
            store.load()
            st.success(f"Using storage folder: {root}")

        st.download_button(
            "Export Saved Scenarios",
            data=export_scenarios_json(store.scenarios),
            file_name=f"scenarios_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json",
            mime="application/json",
            help="Download every saved scenario as a JSON bundle.",
        )
        import_file = st.file_uploader("Import Scenarios JSON", type=["json"], help="Upload an exported bundle.")
        if st.button("Apply Imported JSON", disabled=import_file is None, help="Append the uploaded scenarios."):
            try:
                import_text = import_file.getvalue().decode("utf-8")
            except UnicodeDecodeError as exc:
                append_runtime_event(
                    level="ERROR",
                    event="import_decode_failed",
                    message="Import failed: file is not valid UTF-8 JSON.",
                    context={"file_name": getattr(import_file, "name", "unknown")},
                    exc=exc,
                )
                st.error("Import failed: file is not valid UTF-8 JSON.")
            else:
                scenarios, warnings = parse_import_json(import_text)
                added = store.import_scenarios(scenarios)
                if warnings:
                    st.warning(" | ".join(warnings))
                st.success(f"Imported {added} scenario(s).")

        st.caption(f"Runtime log: `{runtime_log_path()}`")
        events = read_runtime_events(limit=int(st.session_state["runtime_log_limit"]))
        if events:
            st.dataframe(pd.DataFrame(events)[["timestamp_utc", "level", "event", "message"]], width="stretch", hide_index=True)
        else:
            st.caption("No runtime events recorded.")
        if st.button("Clear Runtime Log", help="Delete the runtime event log file."):
            clear_runtime_events()


def render_food_bundle() -> None:
    st.title("Food Bundle Conversion")
    st.caption("Project food revenue with and without a discounted bundle offer.")

    with st.sidebar:
        st.header("Bundle Inputs")
        st.slider("Conversion Rate (%)", 0.0, 100.0, step=1.0, key="fb_conversion_rate", help="Share of customers buying food today.")
        st.slider("Average Spending ($)", 5.0, 50.0, step=1.0, key="fb_average_spending", help="Average food spend per converting customer.")
        st.slider("Bundle Discount (%)", 0.0, 100.0, step=1.0, key="fb_discount_rate", help="Discount applied to the food bundle price.")
        st.number_input("Total Users", min_value=0, step=100, key="fb_total_users", help="Monthly customers considered for the bundle.")

    conversion = float(st.session_state["fb_conversion_rate"])
    spending = float(st.session_state["fb_average_spending"])
    discount = float(st.session_state["fb_discount_rate"])
    users = int(st.session_state["fb_total_users"])

    min_adoption = minimum_adoption_for_profit(conversion, discount)
    m1, m2 = st.columns(2)
    m1.metric("Base Food Revenue", format_currency(users * conversion / 100 * spending))
    m2.metric(
        "Minimum Adoption for Profit",
        "Not reachable" if math.isinf(min_adoption) else f"{min_adoption:.0f}%",
    )

    c1, c2 = st.columns(2)
    fig = px.pie(conversion_split(conversion), names="Segment", values="Share", title="Food Conversion", color_discrete_sequence=["orange", "purple"])
    c1.plotly_chart(fig, width="stretch")

    curve = bundle_adoption_curve(users, conversion, spending, discount)
    bars = curve.melt(
        "Adoption",
        value_vars=["Base Food Revenue", "Bundle Food Revenue", "Revenue Difference"],
        var_name="Series",
        value_name="Revenue",
    )
    fig = px.bar(bars, x="Adoption", y="Revenue", color="Series", barmode="group", title="Revenue by Bundle Adoption Rate")
    c2.plotly_chart(_money_axis(fig), width="stretch")

    st.markdown("### Conversion Growth")
    with st.sidebar:
        st.header("Growth Inputs")
        st.number_input("Base Monthly Revenue ($)", min_value=0, step=500, key="cg_base_revenue", help="Non-food revenue per month.")
        st.slider("Food Conversion Rate (%)", 0.0, 100.0, step=1.0, key="cg_conversion_rate", help="Share of customers buying food.")
        st.slider("Food Spending ($)", 5.0, 200.0, step=1.0, key="cg_average_spending", help="Average food spend per converting customer.")

    growth = conversion_growth_projection(
        base_revenue=float(st.session_state["cg_base_revenue"]),
        conversion_rate=float(st.session_state["cg_conversion_rate"]),
        average_spending=float(st.session_state["cg_average_spending"]),
        months=int(st.session_state["cg_months"]),
        base_customers=int(st.session_state["cg_base_customers"]),
        monthly_growth=float(st.session_state["cg_monthly_growth"]),
    )
    stacked = growth.melt("Month", value_vars=["Base Revenue", "Food Revenue"], var_name="Source", value_name="Revenue")
    fig = px.bar(stacked, x="Month", y="Revenue", color="Source", title="Base + Food Revenue", color_discrete_sequence=["purple", "orange"])
    st.plotly_chart(_money_axis(fig), width="stretch")
    st.dataframe(_format_frame_money(growth, ["Base Revenue", "Food Revenue", "Total Revenue"]), width="stretch", hide_index=True)


def render_kpis() -> None:
    st.title("KPI Comparison")
    st.caption("Compare current KPIs with a potential target.")

    cols = st.columns(2)
    inputs: dict[str, KpiInputs] = {}
    for col, prefix, title in ((cols[0], "kpi_current", "Current KPIs"), (cols[1], "kpi_potential", "Potential KPIs changes")):
        with col:
            st.subheader(title)
            st.number_input("ARPU", min_value=0.0, step=1000.0, key=f"{prefix}_arpu", help="Average revenue per user per visit.")
            st.number_input("Customer Footfall", min_value=0.0, step=1.0, key=f"{prefix}_footfall", help="Customers per day; capped at capacity.")
            st.number_input("Total Capacity", min_value=1.0, step=1.0, key=f"{prefix}_total_capacity", help="Maximum customers served at once.")
            raw = KpiInputs(
                arpu=float(st.session_state[f"{prefix}_arpu"]),
                footfall=float(st.session_state[f"{prefix}_footfall"]),
                total_capacity=float(st.session_state[f"{prefix}_total_capacity"]),
            )
            bounded = bound_footfall(raw)
            if bounded.footfall != raw.footfall:
                st.caption(f"Footfall capped at capacity ({bounded.total_capacity:.0f}).")
            inputs[prefix] = bounded
            revenue = compute_kpi_revenue(bounded)
            st.metric("Daily", format_currency(revenue.daily_revenue, KPI_CURRENCY))
            st.metric("Monthly", format_currency(revenue.monthly_revenue, KPI_CURRENCY))
            st.metric("Annual", format_currency(revenue.annual_revenue, KPI_CURRENCY))

    table = compare_kpis(inputs["kpi_current"], inputs["kpi_potential"])
    st.dataframe(table, width="stretch", hide_index=True)
    revenue_rows = table[table["KPI"].str.endswith("Revenue")].melt(
        "KPI", value_vars=["Current", "Potential"], var_name="Case", value_name="Revenue"
    )
    fig = px.bar(revenue_rows, x="KPI", y="Revenue", color="Case", barmode="group", title="Current vs Potential Revenue (IDR)")
    st.plotly_chart(fig, width="stretch")


if st.session_state["page"] == "Food Bundle":
    render_food_bundle()
elif st.session_state["page"] == "KPIs":
    render_kpis()
else:
    render_revenue_estimator()
