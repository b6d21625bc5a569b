from __future__ import annotations
import json
import numpy as np
import streamlit as st
from temperaments.config import GeneratorDefaults, ReportSettings
from temperaments.generators import (
    CARLOS_PRESETS, ORWELL_PRESETS, CarlosParams, EdoParams, OrwellParams, PartchParams,
    build_scale, carlos_sweep,
)
from temperaments.report import scale_rows, render_table

defaults = GeneratorDefaults()

# ─────────────────────────── Streamlit UI ───────────────────────────
st.set_page_config(page_title="Temperaments — scale tables", layout="wide")
st.title("🎼 Temperaments — tempered steps vs. just ratios")

with st.sidebar:
    st.header("Scale family")
    family = st.radio("Family", ["EDO", "Carlos", "Orwell", "Partch"], index=0)

    if family == "EDO":
        divisions  = st.number_input("Divisions of the octave", 1, 400, defaults.edo_steps, step=1)
        ref_freq   = st.number_input("Root frequency (Hz)", 20.0, 2000.0, defaults.ref_frequency, step=0.5)
        params     = EdoParams(int(divisions), float(ref_freq))
    elif family == "Carlos":
        preset     = st.selectbox("Preset", list(CARLOS_PRESETS) + ["custom"], index=0,
                                  format_func=lambda k: CARLOS_PRESETS[k].label if k in CARLOS_PRESETS else "Custom weights")
        if preset == "custom":
            w5     = st.number_input("Steps ~ 3:2", 0, 200, 9, step=1)
            w3maj  = st.number_input("Steps ~ 5:4", 0, 200, 5, step=1)
            w3min  = st.number_input("Steps ~ 6:5", 0, 200, 4, step=1)
            nsteps = st.number_input("Total steps", 1, 400, 17, step=1)
            params = CarlosParams(int(w5), int(w3maj), int(w3min), int(nsteps), label="Custom Carlos")
        else:
            params = CARLOS_PRESETS[preset]
        show_sweep = st.checkbox("Show weight sweep (5ths 38..45)", False)
    elif family == "Orwell":
        nsteps     = st.number_input("Steps", 1, 200, defaults.orwell_steps, step=1)
        method     = st.selectbox("Generator", list(ORWELL_PRESETS), index=0)
        preset     = ORWELL_PRESETS[method]
        params     = OrwellParams(int(nsteps)) if preset is None else OrwellParams(int(nsteps), *preset)
    else:
        params     = PartchParams()

    st.header("Table")
    decimals       = st.slider("Decimals", 0, 6, 2)
    descending     = st.checkbox("Highest step first", True)

settings = ReportSettings(decimals=int(decimals), descending=bool(descending))

if family == "Carlos" and preset == "custom" and not (w5 or w3maj or w3min):
    st.error("At least one Carlos weight must be non-zero.")
    st.stop()

scale = build_scale(params)
rows  = scale_rows(scale)

st.subheader(scale.name)
missing = scale.unplaced_ratios()
if missing and family != "Partch":
    st.warning("Unplaced ratios: " + ", ".join(f"{r} ({r.label})" for r in missing))

shown = list(reversed(rows)) if settings.descending else rows
st.dataframe(shown, use_container_width=True)

# just error per placed step
placed = [r for r in rows if r["just_error"] is not None]
if placed:
    err = np.array([r["just_error"] for r in placed], dtype=float)
    st.markdown(f"Mean |error| **{np.mean(np.abs(err)):.{settings.decimals}f}¢**, "
                f"worst **{np.max(np.abs(err)):.{settings.decimals}f}¢**")
    st.bar_chart(placed, x="ratio", y="just_error")

if family == "Carlos" and show_sweep:
    st.subheader("Weight sweep")
    st.dataframe([{**r, "weights": "/".join(map(str, r["weights"]))} for r in carlos_sweep()],
                 use_container_width=True)

# Export session JSON
st.download_button(
    "⬇️ Export scale JSON",
    file_name="scale.json",
    mime="application/json",
    data=json.dumps({"scale": scale.name, "settings": settings.to_dict(), "steps": rows}, indent=2)
)
with st.expander("Text table"):
    st.code(render_table(scale, settings))
