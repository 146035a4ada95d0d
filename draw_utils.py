# draw_utils.py
"""
Drawing Utilities Module

This module contains helper functions to draw the scene's visual elements:
buttons, sine-wave signals, pulse rings, translucent shapes, stars, dashed
lines, transformed sprites and the detail panels shown when the user zooms
into a lighthouse or the boat (including their matplotlib charts).
"""

import io
import math

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pygame


def draw_button(screen, rect, text, font, color=(0, 0, 200), alpha=255):
    """
    Draws a rectangular button with centered text.

    Parameters:
        screen (pygame.Surface): The surface on which to draw the button.
        rect (pygame.Rect): The rectangle defining the button's area.
        text (str): The text to display on the button.
        font (pygame.font.Font): The font used to render the text.
        color (tuple): The RGB color of the button (default is (0, 0, 200)).
        alpha (int): Opacity of the whole button, 0-255.
    """
    button = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(button, (*color, 180), button.get_rect(), border_radius=5)
    label = font.render(text, True, (255, 255, 255))
    lx = (rect.width - label.get_width()) // 2
    ly = (rect.height - label.get_height()) // 2
    button.blit(label, (lx, ly))
    button.set_alpha(alpha)
    screen.blit(button, rect.topleft)


def sine_wave_points(origin, angle, length, amplitude, frequency, segments):
    """
    Computes a polyline running from origin along angle, perturbed sideways by a sine.

    Parameters:
        origin (tuple): Start point (x, y).
        angle (float): Direction of travel in radians.
        length (float): Length of the line along its direction.
        amplitude (float): Sideways offset of the sine, in pixels.
        frequency (float): Sine frequency per pixel of length.
        segments (int): Number of line segments.

    Returns:
        list: (x, y) points, starting with origin.
    """
    ox, oy = origin
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    points = [(ox, oy)]
    for i in range(1, segments + 1):
        along = (i / segments) * length
        offset = math.sin(along * frequency) * amplitude
        points.append((ox + along * cos_a - sin_a * offset,
                       oy + along * sin_a + cos_a * offset))
    return points


def draw_sine_wave(screen, color, points, alpha=180, width=2):
    """Draws a translucent polyline computed by sine_wave_points."""
    if len(points) < 2:
        return
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    left, top = int(min(xs)) - width, int(min(ys)) - width
    size = (int(max(xs)) - left + 2 * width + 1, int(max(ys)) - top + 2 * width + 1)
    layer = pygame.Surface(size, pygame.SRCALPHA)
    local = [(x - left, y - top) for x, y in points]
    pygame.draw.lines(layer, (*color, alpha), False, local, width)
    screen.blit(layer, (left, top))


def draw_pulse_ring(screen, color, center, radius, alpha, width=2):
    """Draws a ring of the given radius whose opacity is alpha in [0, 1]."""
    radius = int(radius)
    if radius <= width or alpha <= 0:
        return
    size = radius * 2 + 2
    layer = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(layer, (*color, int(255 * min(1.0, alpha))), (size // 2, size // 2), radius, width)
    screen.blit(layer, (int(center[0]) - size // 2, int(center[1]) - size // 2))


def draw_alpha_circle(screen, color, center, radius, alpha):
    """Draws a filled translucent circle; alpha is in [0, 1]."""
    radius = max(1, int(radius))
    size = radius * 2 + 2
    layer = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(layer, (*color, int(255 * max(0.0, min(1.0, alpha)))), (size // 2, size // 2), radius)
    screen.blit(layer, (int(center[0]) - size // 2, int(center[1]) - size // 2))


def draw_overlay(screen, color, alpha):
    """Tints the whole screen with color at opacity alpha in [0, 1]."""
    if alpha <= 0:
        return
    layer = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    layer.fill((*color, int(255 * min(1.0, alpha))))
    screen.blit(layer, (0, 0))


def blit_transformed(screen, surface, transform, anchor=(0.5, 0.5), alpha=1.0):
    """
    Draws a surface at a Transform, rotating and scaling about its anchor point.

    Parameters:
        screen (pygame.Surface): The target surface.
        surface (pygame.Surface): The sprite, drawn unrotated pointing east.
        transform (Transform): Position, scale and rotation (radians, clockwise on screen).
        anchor (tuple): Anchor as fractions of the sprite size.
        alpha (float): Opacity in [0, 1].
    """
    w, h = surface.get_size()
    pivot = pygame.math.Vector2(w * anchor[0], h * anchor[1])
    offset = pivot - pygame.math.Vector2(w / 2, h / 2)
    degrees = -math.degrees(transform.rotation)
    image = pygame.transform.rotozoom(surface, degrees, transform.scale)
    rotated_offset = offset.rotate(-degrees) * transform.scale
    rect = image.get_rect(center=(transform.x - rotated_offset.x, transform.y - rotated_offset.y))
    image.set_alpha(int(255 * max(0.0, min(1.0, alpha))))
    screen.blit(image, rect)


def draw_star(screen, center, radius, color):
    """
    Draws a 5-pointed star at the given center.

    Parameters:
        screen (pygame.Surface): The target surface.
        center (tuple): A tuple (x, y) representing the center of the star.
        radius (float): The radius of the star (distance from center to outer points).
        color (tuple): The RGB or RGBA color of the star.
    """
    points = []
    inner_radius = radius * 0.5  # Define inner radius for alternating points.
    for i in range(10):
        angle = math.radians(i * 36)  # 36° between each point.
        r = radius if i % 2 == 0 else inner_radius
        x = center[0] + r * math.cos(angle)
        y = center[1] + r * math.sin(angle)
        points.append((x, y))
    pygame.draw.polygon(screen, color, points)


def draw_dashed_line(screen, color, start_pos, end_pos, dash_length=5, space_length=3):
    """
    Draws a dashed line between two points.

    Parameters:
        screen (pygame.Surface): The target surface.
        color (tuple): The RGB color of the dashed line.
        start_pos (tuple): The starting (x, y) coordinate.
        end_pos (tuple): The ending (x, y) coordinate.
        dash_length (int): The length of each dash in pixels.
        space_length (int): The length of the space between dashes in pixels.
    """
    x1, y1 = start_pos
    x2, y2 = end_pos
    dx = x2 - x1
    dy = y2 - y1
    distance = math.hypot(dx, dy)
    if distance == 0:
        return
    dash_count = int(distance // (dash_length + space_length))
    dash_dx = dx / distance * dash_length
    dash_dy = dy / distance * dash_length
    space_dx = dx / distance * space_length
    space_dy = dy / distance * space_length
    current_pos = start_pos
    for _ in range(dash_count):
        next_pos = (current_pos[0] + dash_dx, current_pos[1] + dash_dy)
        pygame.draw.line(screen, color, current_pos, next_pos, 2)
        current_pos = (next_pos[0] + space_dx, next_pos[1] + space_dy)
    pygame.draw.line(screen, color, current_pos, end_pos, 2)


def render_chart_surface(series, width, height, title):
    """
    Renders a small line chart with matplotlib and returns it as a pygame surface.

    Parameters:
        series (tuple): (label, xs, ys) for the plotted line.
        width, height (int): Size of the returned surface in pixels.
        title (str): Chart title.

    Returns:
        pygame.Surface: The rendered chart.
    """
    label, xs, ys = series
    dpi = 100
    fig, ax = plt.subplots(figsize=(width / dpi, height / dpi), dpi=dpi)
    fig.patch.set_facecolor("#333333")
    ax.set_facecolor("#444444")
    ax.plot(xs, ys, color="#FFDD00", linewidth=1.5, label=label)
    ax.set_title(title, color="white", fontsize=8)
    ax.tick_params(colors="white", labelsize=6)
    for spine in ax.spines.values():
        spine.set_color("#AAAAAA")
    ax.legend(fontsize=6, loc="upper right")
    fig.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format="png", facecolor=fig.get_facecolor())
    buf.seek(0)
    plt.close(fig)
    chart_image = pygame.image.load(buf)
    return pygame.transform.scale(chart_image, (width, height))


def draw_detail_panel(screen, panel, center, fonts, alpha=1.0):
    """
    Draws an entity's detail panel centred on the given point.

    Parameters:
        screen (pygame.Surface): The target surface.
        panel (DetailPanel): Title, subsystem schematic, description and chart data.
        center (tuple): Screen position of the panel centre.
        fonts (dict): "title", "label" and "small" pygame fonts.
        alpha (float): Panel opacity in [0, 1].
    """
    if alpha <= 0:
        return
    pw, ph = panel.size
    layer = pygame.Surface((pw, ph), pygame.SRCALPHA)
    layer.fill((51, 51, 51, 235))
    cx, cy = pw // 2, ph // 2

    title = fonts["title"].render(panel.title, True, (255, 255, 255))
    layer.blit(title, title.get_rect(midtop=(cx, 20)))

    # Subsystem schematic, coordinates relative to the panel centre.
    box = pygame.Rect(cx - 80, cy - 50 - 30, 160, 100)
    pygame.draw.rect(layer, (102, 102, 102), box)
    pygame.draw.rect(layer, (255, 255, 255), box, 2)
    label = fonts["label"].render(panel.subsystem, True, (255, 255, 255))
    layer.blit(label, label.get_rect(midtop=(cx, box.bottom + 5)))
    for comp in panel.components:
        rect = pygame.Rect(0, 0, comp.width, comp.height)
        rect.center = (cx + comp.x, cy - 30 + comp.y)
        pygame.draw.rect(layer, comp.color, rect)
        name = fonts["small"].render(comp.name, True, (255, 255, 255))
        layer.blit(name, name.get_rect(midtop=(rect.centerx, rect.bottom + 3)))

    y = box.bottom + 30
    for line in panel.description.split("\n"):
        text = fonts["small"].render(line, True, (255, 255, 255))
        layer.blit(text, text.get_rect(midtop=(cx, y)))
        y += text.get_height() + 2

    if panel.chart is not None:
        if panel.chart_surface is None:
            panel.chart_surface = render_chart_surface(panel.chart, pw - 40, 90, panel.chart_title)
        layer.blit(panel.chart_surface, (20, ph - 100))

    layer.set_alpha(int(255 * min(1.0, alpha)))
    screen.blit(layer, layer.get_rect(center=(int(center[0]), int(center[1]))))


def draw_progress_bar(screen, rect, fraction, color=(255, 255, 255)):
    """Draws an outlined bar filled to the given fraction."""
    pygame.draw.rect(screen, color, rect, 2)
    inner = rect.inflate(-6, -6)
    inner.width = int(inner.width * max(0.0, min(1.0, fraction)))
    if inner.width > 0:
        pygame.draw.rect(screen, color, inner)
