"""
Named color registry.

CSS named colors plus the Material Design swatches, keyed by lowercase
name. The registry is built once at import time and exposed read-only.
"""

from __future__ import annotations

from types import MappingProxyType

_NAMED_COLORS: dict[str, str] = {
    "aliceblue": "#F0F8FFFF",
    "amber100": "#FFECB3FF",
    "amber200": "#FFE082FF",
    "amber300": "#FFD54FFF",
    "amber400": "#FFCA28FF",
    "amber50": "#FFF8E1FF",
    "amber500": "#FFC107FF",
    "amber600": "#FFB300FF",
    "amber700": "#FFA000FF",
    "amber800": "#FF8F00FF",
    "amber900": "#FF6F00FF",
    "ambera100": "#FFE57FFF",
    "ambera200": "#FFD740FF",
    "ambera400": "#FFC400FF",
    "ambera700": "#FFAB00FF",
    "antiquewhite": "#FAEBD7FF",
    "aqua": "#00FFFFFF",
    "aquamarine": "#7FFFD4FF",
    "azure": "#F0FFFFFF",
    "beige": "#F5F5DCFF",
    "bisque": "#FFE4C4FF",
    "black": "#000000FF",
    "blanchedalmond": "#FFEBCDFF",
    "blue": "#0000FFFF",
    "blue100": "#BBDEFBFF",
    "blue200": "#90CAF9FF",
    "blue300": "#64B5F6FF",
    "blue400": "#42A5F5FF",
    "blue50": "#E3F2FDFF",
    "blue500": "#2196F3FF",
    "blue600": "#1E88E5FF",
    "blue700": "#1976D2FF",
    "blue800": "#1565C0FF",
    "blue900": "#0D47A1FF",
    "bluea100": "#82B1FFFF",
    "bluea200": "#448AFFFF",
    "bluea400": "#2979FFFF",
    "bluea700": "#2962FFFF",
    "bluegrey100": "#CFD8DCFF",
    "bluegrey200": "#B0BEC5FF",
    "bluegrey300": "#90A4AEFF",
    "bluegrey400": "#78909CFF",
    "bluegrey50": "#ECEFF1FF",
    "bluegrey500": "#607D8BFF",
    "bluegrey600": "#546E7AFF",
    "bluegrey700": "#455A64FF",
    "bluegrey800": "#37474FFF",
    "bluegrey900": "#263238FF",
    "blueviolet": "#8A2BE2FF",
    "brown": "#A52A2AFF",
    "brown100": "#D7CCC8FF",
    "brown200": "#BCAAA4FF",
    "brown300": "#A1887FFF",
    "brown400": "#8D6E63FF",
    "brown50": "#EFEBE9FF",
    "brown500": "#795548FF",
    "brown600": "#6D4C41FF",
    "brown700": "#5D4037FF",
    "brown800": "#4E342EFF",
    "brown900": "#3E2723FF",
    "burlywood": "#DEB887FF",
    "cadetblue": "#5F9EA0FF",
    "chartreuse": "#7FFF00FF",
    "chocolate": "#D2691EFF",
    "coral": "#FF7F50FF",
    "cornflowerblue": "#6495EDFF",
    "cornsilk": "#FFF8DCFF",
    "crimson": "#DC143CFF",
    "cyan": "#00FFFFFF",
    "cyan100": "#B2EBF2FF",
    "cyan200": "#80DEEAFF",
    "cyan300": "#4DD0E1FF",
    "cyan400": "#26C6DAFF",
    "cyan50": "#E0F7FAFF",
    "cyan500": "#00BCD4FF",
    "cyan600": "#00ACC1FF",
    "cyan700": "#0097A7FF",
    "cyan800": "#00838FFF",
    "cyan900": "#006064FF",
    "cyana100": "#84FFFFFF",
    "cyana200": "#18FFFFFF",
    "cyana400": "#00E5FFFF",
    "cyana700": "#00B8D4FF",
    "darkblue": "#00008BFF",
    "darkcyan": "#008B8BFF",
    "darkgoldenrod": "#B8860BFF",
    "darkgray": "#A9A9A9FF",
    "darkgreen": "#006400FF",
    "darkkhaki": "#BDB76BFF",
    "darkmagenta": "#8B008BFF",
    "darkolivegreen": "#556B2FFF",
    "darkorange": "#FF8C00FF",
    "darkorchid": "#9932CCFF",
    "darkred": "#8B0000FF",
    "darksalmon": "#E9967AFF",
    "darkseagreen": "#8FBC8FFF",
    "darkslateblue": "#483D8BFF",
    "darkslategray": "#2F4F4FFF",
    "darkturquoise": "#00CED1FF",
    "darkviolet": "#9400D3FF",
    "deeporange100": "#FFCCBCFF",
    "deeporange200": "#FFAB91FF",
    "deeporange300": "#FF8A65FF",
    "deeporange400": "#FF7043FF",
    "deeporange50": "#FBE9E7FF",
    "deeporange500": "#FF5722FF",
    "deeporange600": "#F4511EFF",
    "deeporange700": "#E64A19FF",
    "deeporange800": "#D84315FF",
    "deeporange900": "#BF360CFF",
    "deeporangea100": "#FF9E80FF",
    "deeporangea200": "#FF6E40FF",
    "deeporangea400": "#FF3D00FF",
    "deeporangea700": "#DD2C00FF",
    "deeppink": "#FF1493FF",
    "deeppurple100": "#D1C4E9FF",
    "deeppurple200": "#B39DDBFF",
    "deeppurple300": "#9575CDFF",
    "deeppurple400": "#7E57C2FF",
    "deeppurple50": "#EDE7F6FF",
    "deeppurple500": "#673AB7FF",
    "deeppurple600": "#5E35B1FF",
    "deeppurple700": "#512DA8FF",
    "deeppurple800": "#4527A0FF",
    "deeppurple900": "#311B92FF",
    "deeppurplea100": "#B388FFFF",
    "deeppurplea200": "#7C4DFFFF",
    "deeppurplea400": "#651FFFFF",
    "deeppurplea700": "#6200EAFF",
    "deepskyblue": "#00BFFFFF",
    "dimgray": "#696969FF",
    "dodgerblue": "#1E90FFFF",
    "firebrick": "#B22222FF",
    "floralwhite": "#FFFAF0FF",
    "forestgreen": "#228B22FF",
    "fuchsia": "#FF00FFFF",
    "gainsboro": "#DCDCDCFF",
    "ghostwhite": "#F8F8FFFF",
    "gold": "#FFD700FF",
    "goldenrod": "#DAA520FF",
    "gray": "#808080FF",
    "green": "#008000FF",
    "green100": "#C8E6C9FF",
    "green200": "#A5D6A7FF",
    "green300": "#81C784FF",
    "green400": "#66BB6AFF",
    "green50": "#E8F5E9FF",
    "green500": "#4CAF50FF",
    "green600": "#43A047FF",
    "green700": "#388E3CFF",
    "green800": "#2E7D32FF",
    "green900": "#1B5E20FF",
    "greena100": "#B9F6CAFF",
    "greena200": "#69F0AEFF",
    "greena400": "#00E676FF",
    "greena700": "#00C853FF",
    "greenyellow": "#ADFF2FFF",
    "grey100": "#F5F5F5FF",
    "grey200": "#EEEEEEFF",
    "grey300": "#E0E0E0FF",
    "grey400": "#BDBDBDFF",
    "grey50": "#FAFAFAFF",
    "grey500": "#9E9E9EFF",
    "grey600": "#757575FF",
    "grey700": "#616161FF",
    "grey800": "#424242FF",
    "grey900": "#212121FF",
    "honeydew": "#F0FFF0FF",
    "hotpink": "#FF69B4FF",
    "indianred": "#CD5C5CFF",
    "indigo": "#4B0082FF",
    "indigo100": "#C5CAE9FF",
    "indigo200": "#9FA8DAFF",
    "indigo300": "#7986CBFF",
    "indigo400": "#5C6BC0FF",
    "indigo50": "#E8EAF6FF",
    "indigo500": "#3F51B5FF",
    "indigo600": "#3949ABFF",
    "indigo700": "#303F9FFF",
    "indigo800": "#283593FF",
    "indigo900": "#1A237EFF",
    "indigoa100": "#8C9EFFFF",
    "indigoa200": "#536DFEFF",
    "indigoa400": "#3D5AFEFF",
    "indigoa700": "#304FFEFF",
    "ivory": "#FFFFF0FF",
    "khaki": "#F0E68CFF",
    "lavender": "#E6E6FAFF",
    "lavenderblush": "#FFF0F5FF",
    "lawngreen": "#7CFC00FF",
    "lemonchiffon": "#FFFACDFF",
    "lightblue": "#ADD8E6FF",
    "lightblue100": "#B3E5FCFF",
    "lightblue200": "#81D4FAFF",
    "lightblue300": "#4FC3F7FF",
    "lightblue400": "#29B6F6FF",
    "lightblue50": "#E1F5FEFF",
    "lightblue500": "#03A9F4FF",
    "lightblue600": "#039BE5FF",
    "lightblue700": "#0288D1FF",
    "lightblue800": "#0277BDFF",
    "lightblue900": "#01579BFF",
    "lightbluea100": "#80D8FFFF",
    "lightbluea200": "#40C4FFFF",
    "lightbluea400": "#00B0FFFF",
    "lightbluea700": "#0091EAFF",
    "lightcoral": "#F08080FF",
    "lightcyan": "#E0FFFFFF",
    "lightgoldenrodyellow": "#FAFAD2FF",
    "lightgray": "#D3D3D3FF",
    "lightgreen": "#90EE90FF",
    "lightgreen100": "#DCEDC8FF",
    "lightgreen200": "#C5E1A5FF",
    "lightgreen300": "#AED581FF",
    "lightgreen400": "#9CCC65FF",
    "lightgreen50": "#F1F8E9FF",
    "lightgreen500": "#8BC34AFF",
    "lightgreen600": "#7CB342FF",
    "lightgreen700": "#689F38FF",
    "lightgreen800": "#558B2FFF",
    "lightgreen900": "#33691EFF",
    "lightgreena100": "#CCFF90FF",
    "lightgreena200": "#B2FF59FF",
    "lightgreena400": "#76FF03FF",
    "lightgreena700": "#64DD17FF",
    "lightpink": "#FFB6C1FF",
    "lightsalmon": "#FFA07AFF",
    "lightseagreen": "#20B2AAFF",
    "lightskyblue": "#87CEFAFF",
    "lightslategray": "#778899FF",
    "lightsteelblue": "#B0C4DEFF",
    "lightyellow": "#FFFFE0FF",
    "lime": "#00FF00FF",
    "lime100": "#F0F4C3FF",
    "lime200": "#E6EE9CFF",
    "lime300": "#DCE775FF",
    "lime400": "#D4E157FF",
    "lime50": "#F9FBE7FF",
    "lime500": "#CDDC39FF",
    "lime600": "#C0CA33FF",
    "lime700": "#AFB42BFF",
    "lime800": "#9E9D24FF",
    "lime900": "#827717FF",
    "limea100": "#F4FF81FF",
    "limea200": "#EEFF41FF",
    "limea400": "#C6FF00FF",
    "limea700": "#AEEA00FF",
    "limegreen": "#32CD32FF",
    "linen": "#FAF0E6FF",
    "magenta": "#FF00FFFF",
    "maroon": "#800000FF",
    "mediumaquamarine": "#66CDAAFF",
    "mediumblue": "#0000CDFF",
    "mediumorchid": "#BA55D3FF",
    "mediumpurple": "#9370DBFF",
    "mediumseagreen": "#3CB371FF",
    "mediumslateblue": "#7B68EEFF",
    "mediumspringgreen": "#00FA9AFF",
    "mediumturquoise": "#48D1CCFF",
    "mediumvioletred": "#C71585FF",
    "midnightblue": "#191970FF",
    "mintcream": "#F5FFFAFF",
    "mistyrose": "#FFE4E1FF",
    "moccasin": "#FFE4B5FF",
    "navajowhite": "#FFDEADFF",
    "navy": "#000080FF",
    "oldlace": "#FDF5E6FF",
    "olive": "#808000FF",
    "olivedrab": "#6B8E23FF",
    "orange": "#FFA500FF",
    "orange100": "#FFE0B2FF",
    "orange200": "#FFCC80FF",
    "orange300": "#FFB74DFF",
    "orange400": "#FFA726FF",
    "orange50": "#FFF3E0FF",
    "orange500": "#FF9800FF",
    "orange600": "#FB8C00FF",
    "orange700": "#F57C00FF",
    "orange800": "#EF6C00FF",
    "orange900": "#E65100FF",
    "orangea100": "#FFD180FF",
    "orangea200": "#FFAB40FF",
    "orangea400": "#FF9100FF",
    "orangea700": "#FF6D00FF",
    "orangered": "#FF4500FF",
    "orchid": "#DA70D6FF",
    "palegoldenrod": "#EEE8AAFF",
    "palegreen": "#98FB98FF",
    "paleturquoise": "#AFEEEEFF",
    "palevioletred": "#DB7093FF",
    "papayawhip": "#FFEFD5FF",
    "peachpuff": "#FFDAB9FF",
    "peru": "#CD853FFF",
    "pink": "#FFC0CBFF",
    "pink100": "#F8BBD0FF",
    "pink200": "#F48FB1FF",
    "pink300": "#F06292FF",
    "pink400": "#EC407AFF",
    "pink50": "#FCE4ECFF",
    "pink500": "#E91E63FF",
    "pink600": "#D81B60FF",
    "pink700": "#C2185BFF",
    "pink800": "#AD1457FF",
    "pink900": "#880E4FFF",
    "pinka100": "#FF80ABFF",
    "pinka200": "#FF4081FF",
    "pinka400": "#F50057FF",
    "pinka700": "#C51162FF",
    "plum": "#DDA0DDFF",
    "powderblue": "#B0E0E6FF",
    "purple": "#800080FF",
    "purple100": "#E1BEE7FF",
    "purple200": "#CE93D8FF",
    "purple300": "#BA68C8FF",
    "purple400": "#AB47BCFF",
    "purple50": "#F3E5F5FF",
    "purple500": "#9C27B0FF",
    "purple600": "#8E24AAFF",
    "purple700": "#7B1FA2FF",
    "purple800": "#6A1B9AFF",
    "purple900": "#4A148CFF",
    "purplea100": "#EA80FCFF",
    "purplea200": "#E040FBFF",
    "purplea400": "#D500F9FF",
    "purplea700": "#AA00FFFF",
    "red": "#FF0000FF",
    "red100": "#FFCDD2FF",
    "red200": "#EF9A9AFF",
    "red300": "#E57373FF",
    "red400": "#EF5350FF",
    "red50": "#FFEBEEFF",
    "red500": "#F44336FF",
    "red600": "#E53935FF",
    "red700": "#D32F2FFF",
    "red800": "#C62828FF",
    "red900": "#B71C1CFF",
    "reda100": "#FF8A80FF",
    "reda200": "#FF5252FF",
    "reda400": "#FF1744FF",
    "reda700": "#D50000FF",
    "rosybrown": "#BC8F8FFF",
    "royalblue": "#4169E1FF",
    "saddlebrown": "#8B4513FF",
    "salmon": "#FA8072FF",
    "sandybrown": "#F4A460FF",
    "seagreen": "#2E8B57FF",
    "seashell": "#FFF5EEFF",
    "sienna": "#A0522DFF",
    "silver": "#C0C0C0FF",
    "skyblue": "#87CEEBFF",
    "slateblue": "#6A5ACDFF",
    "slategray": "#708090FF",
    "snow": "#FFFAFAFF",
    "springgreen": "#00FF7FFF",
    "steelblue": "#4682B4FF",
    "tan": "#D2B48CFF",
    "teal": "#008080FF",
    "teal100": "#B2DFDBFF",
    "teal200": "#80CBC4FF",
    "teal300": "#4DB6ACFF",
    "teal400": "#26A69AFF",
    "teal50": "#E0F2F1FF",
    "teal500": "#009688FF",
    "teal600": "#00897BFF",
    "teal700": "#00796BFF",
    "teal800": "#00695CFF",
    "teal900": "#004D40FF",
    "teala100": "#A7FFEBFF",
    "teala200": "#64FFDAFF",
    "teala400": "#1DE9B6FF",
    "teala700": "#00BFA5FF",
    "thistle": "#D8BFD8FF",
    "tomato": "#FF6347FF",
    "transparent": "#00000000",
    "turquoise": "#40E0D0FF",
    "violet": "#EE82EEFF",
    "wheat": "#F5DEB3FF",
    "white": "#FFFFFFFF",
    "whitesmoke": "#F5F5F5FF",
    "yellow": "#FFFF00FF",
    "yellow100": "#FFF9C4FF",
    "yellow200": "#FFF59DFF",
    "yellow300": "#FFF176FF",
    "yellow400": "#FFEE58FF",
    "yellow50": "#FFFDE7FF",
    "yellow500": "#FFEB3BFF",
    "yellow600": "#FDD835FF",
    "yellow700": "#FBC02DFF",
    "yellow800": "#F9A825FF",
    "yellow900": "#F57F17FF",
    "yellowa100": "#FFFF8DFF",
    "yellowa200": "#FFFF00FF",
    "yellowa400": "#FFEA00FF",
    "yellowa700": "#FFD600FF",
    "yellowgreen": "#9ACD32FF",
}

NAMED_COLORS: MappingProxyType[str, str] = MappingProxyType(_NAMED_COLORS)


def lookup_named_color(name: str) -> str | None:
    """Return the canonical ``#RRGGBBAA`` text for a registry name, or None."""
    return NAMED_COLORS.get(name.strip().lower())


def is_named_color(name: str) -> bool:
    """Check whether a name exists in the registry (case-insensitive)."""
    return lookup_named_color(name) is not None
