"""Generate the window icon (64×64 PIL Image, in-memory)."""

from PIL import Image, ImageDraw, ImageFont

ACCENT = "#0078D4"


def create_icon_image(day: int) -> Image.Image:
    """Return a 64×64 RGBA calendar page with *day* printed below a coloured band."""
    size = 64
    band = 16
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.rectangle((0, 0, size - 1, size - 1), fill="white", outline="#555555")
    draw.rectangle((0, 0, size - 1, band), fill=ACCENT)

    text = str(day)
    area = size - band - 4

    # Find the largest font size that fits below the band
    font_size = 60
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size - 8 and bbox[3] - bbox[1] <= area:
            break
        font_size -= 1

    # Centre the visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = band + 2 + (area - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
