"""The default user-interface theme: style metrics and the colour palette."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

Vec2 = tuple[float, float]
Colour = tuple[float, float, float, float]


class Direction(Enum):
    """Placement of a widget part within its frame."""

    LEFT = "left"
    RIGHT = "right"


_COLORS: dict[str, Colour] = {
    "Text": (1.0, 1.0, 1.0, 1.0),
    "TextDisabled": (0.2745098173618317, 0.3176470696926117, 0.4509803950786591, 1.0),
    "WindowBg": (0.0784313753247261, 0.08627451211214066, 0.1019607856869698, 1.0),
    "ChildBg": (0.09250493347644806, 0.100297249853611, 0.1158798336982727, 1.0),
    "PopupBg": (0.0784313753247261, 0.08627451211214066, 0.1019607856869698, 1.0),
    "Border": (0.1568627506494522, 0.168627455830574, 0.1921568661928177, 1.0),
    "BorderShadow": (0.0784313753247261, 0.08627451211214066, 0.1019607856869698, 1.0),
    "FrameBg": (0.1120669096708298, 0.1262156516313553, 0.1545064449310303, 1.0),
    "FrameBgHovered": (0.1568627506494522, 0.168627455830574, 0.1921568661928177, 1.0),
    "FrameBgActive": (0.1568627506494522, 0.168627455830574, 0.1921568661928177, 1.0),
    "TitleBg": (0.0470588244497776, 0.05490196123719215, 0.07058823853731155, 1.0),
    "TitleBgActive": (0.0470588244497776, 0.05490196123719215, 0.07058823853731155, 1.0),
    "TitleBgCollapsed": (0.0784313753247261, 0.08627451211214066, 0.1019607856869698, 1.0),
    "MenuBarBg": (0.09803921729326248, 0.105882354080677, 0.1215686276555061, 1.0),
    "ScrollbarBg": (0.0470588244497776, 0.05490196123719215, 0.07058823853731155, 1.0),
    "ScrollbarGrab": (0.1176470592617989, 0.1333333402872086, 0.1490196138620377, 1.0),
    "ScrollbarGrabHovered": (0.1568627506494522, 0.168627455830574, 0.1921568661928177, 1.0),
    "ScrollbarGrabActive": (0.1176470592617989, 0.1333333402872086, 0.1490196138620377, 1.0),
    "CheckMark": (0.9725490212440491, 1.0, 0.4980392158031464, 1.0),
    "SliderGrab": (0.971993625164032, 1.0, 0.4980392456054688, 1.0),
    "SliderGrabActive": (1.0, 0.7953379154205322, 0.4980392456054688, 1.0),
    "Button": (0.1176470592617989, 0.1333333402872086, 0.1490196138620377, 1.0),
    "ButtonHovered": (0.1821731775999069, 0.1897992044687271, 0.1974248886108398, 1.0),
    "ButtonActive": (0.1545050293207169, 0.1545048952102661, 0.1545064449310303, 1.0),
    "Header": (0.1414651423692703, 0.1629818230867386, 0.2060086131095886, 1.0),
    "HeaderHovered": (0.1072951927781105, 0.107295036315918, 0.1072961091995239, 1.0),
    "HeaderActive": (0.0784313753247261, 0.08627451211214066, 0.1019607856869698, 1.0),
    "Separator": (0.1293079704046249, 0.1479243338108063, 0.1931330561637878, 1.0),
    "SeparatorHovered": (0.1568627506494522, 0.1843137294054031, 0.250980406999588, 1.0),
    "SeparatorActive": (0.1568627506494522, 0.1843137294054031, 0.250980406999588, 1.0),
    "ResizeGrip": (0.1459212601184845, 0.1459220051765442, 0.1459227204322815, 1.0),
    "ResizeGripHovered": (0.9725490212440491, 1.0, 0.4980392158031464, 1.0),
    "ResizeGripActive": (0.999999463558197, 1.0, 0.9999899864196777, 1.0),
    "Tab": (0.0784313753247261, 0.08627451211214066, 0.1019607856869698, 1.0),
    "TabHovered": (0.1176470592617989, 0.1333333402872086, 0.1490196138620377, 1.0),
    "TabActive": (0.1176470592617989, 0.1333333402872086, 0.1490196138620377, 1.0),
    "TabUnfocused": (0.0784313753247261, 0.08627451211214066, 0.1019607856869698, 1.0),
    "TabUnfocusedActive": (0.1249424293637276, 0.2735691666603088, 0.5708154439926147, 1.0),
    "PlotLines": (0.5215686559677124, 0.6000000238418579, 0.7019608020782471, 1.0),
    "PlotLinesHovered": (0.03921568766236305, 0.9803921580314636, 0.9803921580314636, 1.0),
    "PlotHistogram": (0.8841201663017273, 0.7941429018974304, 0.5615870356559753, 1.0),
    "PlotHistogramHovered": (0.9570815563201904, 0.9570719599723816, 0.9570761322975159, 1.0),
    "TableHeaderBg": (0.0470588244497776, 0.05490196123719215, 0.07058823853731155, 1.0),
    "TableBorderStrong": (0.0470588244497776, 0.05490196123719215, 0.07058823853731155, 1.0),
    "TableBorderLight": (0.0, 0.0, 0.0, 1.0),
    "TableRowBg": (0.1176470592617989, 0.1333333402872086, 0.1490196138620377, 1.0),
    "TableRowBgAlt": (0.09803921729326248, 0.105882354080677, 0.1215686276555061, 1.0),
    "TextSelectedBg": (0.9356134533882141, 0.9356129765510559, 0.9356223344802856, 1.0),
    "DragDropTarget": (0.4980392158031464, 0.5137255191802979, 1.0, 1.0),
    "NavHighlight": (0.266094446182251, 0.2890366911888123, 1.0, 1.0),
    "NavWindowingHighlight": (0.4980392158031464, 0.5137255191802979, 1.0, 1.0),
    "NavWindowingDimBg": (0.196078434586525, 0.1764705926179886, 0.5450980663299561, 0.501960813999176),
    "ModalWindowDimBg": (0.196078434586525, 0.1764705926179886, 0.5450980663299561, 0.501960813999176),
}


def default_colors() -> dict[str, Colour]:
    """Return a fresh copy of the theme palette, keyed by widget colour name."""
    return dict(_COLORS)


@dataclass
class Style:
    """Widget metrics and colours of the user interface."""

    alpha: float = 1.0
    disabled_alpha: float = 1.0
    window_padding: Vec2 = (12.0, 12.0)
    window_rounding: float = 11.5
    window_border_size: float = 0.0
    window_min_size: Vec2 = (20.0, 20.0)
    window_title_align: Vec2 = (0.5, 0.5)
    window_menu_button_position: Direction = Direction.RIGHT
    child_rounding: float = 0.0
    child_border_size: float = 1.0
    popup_rounding: float = 0.0
    popup_border_size: float = 1.0
    frame_padding: Vec2 = (20.0, 3.400000095367432)
    frame_rounding: float = 11.89999961853027
    frame_border_size: float = 0.0
    item_spacing: Vec2 = (4.300000190734863, 5.5)
    item_inner_spacing: Vec2 = (7.099999904632568, 1.799999952316284)
    cell_padding: Vec2 = (12.10000038146973, 9.199999809265137)
    indent_spacing: float = 0.0
    columns_min_spacing: float = 4.900000095367432
    scrollbar_size: float = 48.60000038146973
    scrollbar_rounding: float = 15.89999961853027
    grab_min_size: float = 40.700000047683716
    grab_rounding: float = 8.0
    tab_rounding: float = 8.89999961853027
    tab_border_size: float = 0.0
    color_button_position: Direction = Direction.RIGHT
    button_text_align: Vec2 = (0.5, 0.5)
    selectable_text_align: Vec2 = (0.0, 0.0)
    colors: dict[str, Colour] = field(default_factory=default_colors)


def default_style(mobile: bool = True) -> Style:
    """Build the default theme.

    On mobile the scrollbar and slider grabs are made larger so they can be
    handled with a finger.
    """
    if mobile:
        return Style(scrollbar_size=48.60000038146973, grab_min_size=40.700000047683716)
    return Style(scrollbar_size=20.60000038146973, grab_min_size=12.700000047683716)