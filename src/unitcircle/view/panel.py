"""
Value Panel
Writes the formatted angle, coordinates and ratios into an OutputSink.
"""
from __future__ import annotations

from unitcircle.model.formatting import format_coords, format_degrees, format_pi_multiple, format_value
from unitcircle.model.state import DisplayUnit, VisualizerState
from unitcircle.model.trig import TrigFunction, TrigValues
from unitcircle.view.surface import OutputSink, PanelField

FUNCTION_FIELDS: dict[TrigFunction, PanelField] = {
    TrigFunction.SIN: PanelField.SIN,
    TrigFunction.COS: PanelField.COS,
    TrigFunction.TAN: PanelField.TAN,
    TrigFunction.COT: PanelField.COT,
    TrigFunction.SEC: PanelField.SEC,
    TrigFunction.CSC: PanelField.CSC,
}


class ValuePanel:
    """Formats the state and pushes text into the sink. Reads nothing back but the toggle."""

    def __init__(self, sink: OutputSink) -> None:
        self.sink = sink

    def refresh(self, state: VisualizerState) -> None:
        values = TrigValues.from_angle(state.angle)

        self.refresh_unit(state.display_unit)
        self.sink.write_text(PanelField.ANGLE_DEG, format_degrees(state.angle))
        self.sink.write_text(PanelField.ANGLE_RAD, format_pi_multiple(state.angle))
        self.sink.write_text(PanelField.COORDS, format_coords(values.cos, values.sin))

        for function, panel_field in FUNCTION_FIELDS.items():
            enabled = state.is_enabled(function)
            self.sink.set_visible(panel_field, enabled)
            if enabled:
                self.sink.write_text(panel_field, format_value(values.value_of(function)))

    def refresh_unit(self, unit: DisplayUnit) -> None:
        """Emphasize the active unit and write the mode label."""
        self.sink.set_emphasis(PanelField.ANGLE_DEG, unit is DisplayUnit.DEGREES)
        self.sink.set_emphasis(PanelField.ANGLE_RAD, unit is DisplayUnit.RADIANS)
        self.sink.write_text(PanelField.MODE_TEXT, unit.label)

    def toggle_unit(self) -> DisplayUnit:
        """Unit selected by the toggle control."""
        return DisplayUnit.from_toggle(self.sink.read_toggle())
