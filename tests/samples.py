import numpy as np

# Primary and secondary colors as bytes, with their hue in degrees
RED_INT_RGB = np.array([255, 0, 0], dtype=np.uint8)
GREEN_INT_RGB = np.array([0, 255, 0], dtype=np.uint8)
BLUE_INT_RGB = np.array([0, 0, 255], dtype=np.uint8)
YELLOW_INT_RGB = np.array([255, 255, 0], dtype=np.uint8)
MAGENTA_INT_RGB = np.array([255, 0, 255], dtype=np.uint8)
CYAN_INT_RGB = np.array([0, 255, 255], dtype=np.uint8)

PRIMARIES = np.stack([
    RED_INT_RGB,
    YELLOW_INT_RGB,
    GREEN_INT_RGB,
    CYAN_INT_RGB,
    BLUE_INT_RGB,
    MAGENTA_INT_RGB,
])
PRIMARY_HUES = np.array([0, 60, 120, 180, 240, 300], dtype=np.float32)

# text -> (r, g, b) of inputs that must parse
samples_parse_rgb = {
    "#ff00aa": (255, 0, 170),
    "#f0a": (255, 0, 170),
    "#FF00AA": (255, 0, 170),
    "#104C88": (16, 76, 136),
    "#ff00aa80": (255, 0, 170),
    "rgb(129,45,78)": (129, 45, 78),
    "rgba(129,45,78, 0.8)": (129, 45, 78),
    "rgb( 0 , 0 , 0 )": (0, 0, 0),
    "hsl(120, 45%, 90%)": (218, 240, 218),
    "hsla(120, 45%, 90%, 0.5)": (218, 240, 218),
    "hsl(210,79%,30%)": (16, 76, 136),
    "hsv(120, 60%, 80%)": (81, 204, 81),
    "hsv(210,44%,80%)": (114, 159, 204),
    "cmyk(100, 40,70,90)": (0, 15, 7),
    "cmyk(50,20,10,10)": (114, 183, 206),
}

# inputs that must fail with a format error
samples_format_errors = [
    "#zz00aa",
    "#f0aa",
    "#ff00aaZ0",
    "#ff00a_",
    "#",
    "",
    "red",
    "RGB(1,2,3)",
    "rgb(1,2)",
    "rgb(256,0,0)",
    "rgb(1.5,2,3)",
    "rgb(1,2,3)x",
    "rgba(1,2,3)",
    "hsl(120,45,90)",
    "hsla(120,45%,90%,1.0)",
    "hsla(120,45%,90%,0.5",
    "hslax(120,45%,90%,0.5)",
    "hsv(120,60%)",
    "cmyk(1,2,3)",
    "cmyk(1%,2%,3%,4%)",
    "lab(50,0,0)",
]

# inputs that are well formed but out of range
samples_value_errors = [
    "hsl(360,50%,50%)",
    "hsl(120,101%,50%)",
    "hsl(120,50%,200%)",
    "hsla(400,50%,50%,0.5)",
    "hsv(361,10%,10%)",
    "hsv(10,10%,101%)",
    "cmyk(101,0,0,0)",
    "cmyk(0,0,0,150)",
    "rgba(1,2,3,1.5)",
    "rgba(1,2,3,2)",
]

# hex -> every rendering of the opaque color
samples_renders = {
    "#ff00aa": {
        "hex": "#FF00AA",
        "hex_alpha": "#FF00AAFF",
        "alpha_hex": "#FFFF00AA",
        "rgb": "rgb(255,0,170)",
        "rgba": "rgba(255,0,170,1)",
        "hsl": "hsl(320,100%,50%)",
        "hsla": "hsla(320,100%,50%,1.0)",
        "hsv": "hsv(320,100%,100%)",
        "cmyk": "cmyk(0,100,33,0)",
    },
    "#FF0000": {
        "hex": "#FF0000",
        "hex_alpha": "#FF0000FF",
        "alpha_hex": "#FFFF0000",
        "rgb": "rgb(255,0,0)",
        "rgba": "rgba(255,0,0,1)",
        "hsl": "hsl(0,100%,50%)",
        "hsla": "hsla(0,100%,50%,1.0)",
        "hsv": "hsv(0,100%,100%)",
        "cmyk": "cmyk(0,100,100,0)",
    },
    "#104C88": {
        "hex": "#104C88",
        "hex_alpha": "#104C88FF",
        "alpha_hex": "#FF104C88",
        "rgb": "rgb(16,76,136)",
        "rgba": "rgba(16,76,136,1)",
        "hsl": "hsl(210,79%,30%)",
        "hsla": "hsla(210,79%,30%,1.0)",
        "hsv": "hsv(210,88%,53%)",
        "cmyk": "cmyk(88,44,0,47)",
    },
    "#000": {
        "hex": "#000000",
        "hex_alpha": "#000000FF",
        "alpha_hex": "#FF000000",
        "rgb": "rgb(0,0,0)",
        "rgba": "rgba(0,0,0,1)",
        "hsl": "hsl(0,0%,0%)",
        "hsla": "hsla(0,0%,0%,1.0)",
        "hsv": "hsv(0,0%,0%)",
        "cmyk": "cmyk(0,0,0,100)",
    },
    "#fff": {
        "hex": "#FFFFFF",
        "hex_alpha": "#FFFFFFFF",
        "alpha_hex": "#FFFFFFFF",
        "rgb": "rgb(255,255,255)",
        "rgba": "rgba(255,255,255,1)",
        "hsl": "hsl(0,0%,100%)",
        "hsla": "hsla(0,0%,100%,1.0)",
        "hsv": "hsv(0,0%,100%)",
        "cmyk": "cmyk(0,0,0,0)",
    },
}

# renderings of black at half opacity: composited ones turn grey
samples_half_black = {
    "hex": "#7F7F7F",
    "hex_alpha": "#0000007F",
    "alpha_hex": "#7F000000",
    "rgb": "rgb(127,127,127)",
    "rgba": "rgba(0,0,0,0.5)",
    "hsl": "hsl(0,0%,50%)",
    "hsla": "hsla(0,0%,0%,0.5)",
    "hsv": "hsv(0,0%,50%)",
    "cmyk": "cmyk(0,0,0,50)",
}
