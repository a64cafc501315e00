"""
Theme - Centralized color and style definitions
All UI components reference this for consistent styling

RULE: All sliders must be vertical - no horizontal sliders
"""
import platform

SKIN = {
    # Backgrounds (darkest to lightest)
    'bg_canvas': '#060a12',
    'bg_dark': '#0b111c',
    'bg_base': '#111826',
    'bg_light': '#1b2436',
    'bg_highlight': '#26324a',

    # Borders
    'border_dark': '#1e2638',
    'border_light': '#3a4660',

    # Text (dimmest to brightest)
    'text_dim': '#5d6a82',
    'text_normal': '#aab4c8',
    'text_bright': '#e2e8f4',

    # Accents
    'accent': '#5fd4ff',
    'accent_dim': '#2f7fa0',
    'warning': '#ff9966',

    'font_family': 'Helvetica' if platform.system() == 'Darwin' else 'Sans Serif',
    'font_mono': 'Menlo' if platform.system() == 'Darwin' else 'Monospace',
    'font_size_title': 14,
    'font_size_label': 11,
    'font_size_small': 10,
}


def get(key, default='#ff00ff'):
    """Get value from the skin. Magenta = missing key."""
    return SKIN.get(key, default)


FONT_FAMILY = get('font_family')
MONO_FONT = get('font_mono')

FONT_SIZES = {
    'title': get('font_size_title'),
    'label': get('font_size_label'),
    'small': get('font_size_small'),
}

COLORS = {
    'canvas': get('bg_canvas'),
    'background': get('bg_dark'),
    'panel': get('bg_base'),
    'background_highlight': get('bg_highlight'),
    'border': get('border_dark'),
    'border_light': get('border_light'),
    'text': get('text_normal'),
    'text_dim': get('text_dim'),
    'text_bright': get('text_bright'),
    'accent': get('accent'),
    'accent_dim': get('accent_dim'),
    'warning': get('warning'),
}


def button_style(state='normal'):
    """Get button stylesheet for state: normal, ghost, accent."""
    if state == 'accent':
        return f"""
            QPushButton {{
                background-color: {COLORS['accent_dim']};
                color: {COLORS['text_bright']};
                border-radius: 3px;
                padding: 4px 10px;
            }}
            QPushButton:hover {{
                background-color: {COLORS['accent']};
                color: {COLORS['background']};
            }}
        """
    elif state == 'ghost':
        return f"""
            QPushButton {{
                background-color: transparent;
                color: {COLORS['text_dim']};
                border: 1px solid {COLORS['border_light']};
                border-radius: 3px;
                padding: 2px 6px;
            }}
            QPushButton:hover {{
                color: {COLORS['warning']};
                border-color: {COLORS['warning']};
            }}
        """
    return f"""
        QPushButton {{
            background-color: {COLORS['background_highlight']};
            color: {COLORS['text_bright']};
            border-radius: 3px;
            padding: 4px 10px;
        }}
        QPushButton:hover {{
            background-color: {COLORS['border_light']};
        }}
    """


def slider_style():
    """Vertical slider stylesheet."""
    return f"""
        QSlider::groove:vertical {{
            background: {COLORS['background']};
            width: 6px;
            border-radius: 3px;
        }}
        QSlider::handle:vertical {{
            background: {COLORS['accent']};
            height: 12px;
            margin: 0 -5px;
            border-radius: 6px;
        }}
    """
