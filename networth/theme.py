class Theme:
    LIGHT = {
        "bg_primary": "#F3F4F6",      # Window background
        "bg_secondary": "#FFFFFF",    # Form sections
        "text_primary": "#1F2937",
        "text_secondary": "#4B5563",  # Captions under fields
        "accent": "#3B82F6",
        "accent_hover": "#2563eb",
        "border": "#E5E7EB",
        "input_bg": "#FFFFFF",
        "danger": "#EF4444",          # Error line under the result
        "glow": "#FACC15",            # Currency button after a new result
        "output_bg": "#EFF6FF",
    }

    DARK = {
        "bg_primary": "#111827",
        "bg_secondary": "#1F2937",
        "text_primary": "#F9FAFB",
        "text_secondary": "#9CA3AF",
        "accent": "#60A5FA",
        "accent_hover": "#3B82F6",
        "border": "#374151",
        "input_bg": "#374151",
        "danger": "#F87171",
        "glow": "#FDE047",
        "output_bg": "#1e293b",
    }


class ThemeManager:
    """Session-only light/dark palette; the choice is not persisted."""

    def __init__(self, theme_name="Light"):
        self.set_theme(theme_name)

    def set_theme(self, theme_name):
        self.current_theme_name = theme_name
        self.colors = Theme.DARK if theme_name == "Dark" else Theme.LIGHT

    def toggle_theme(self):
        new_theme = "Dark" if self.current_theme_name == "Light" else "Light"
        self.set_theme(new_theme)
        return new_theme

    def get_color(self, key):
        return self.colors.get(key, "#ff0000")  # Return red if key missing

    @property
    def is_dark(self):
        return self.current_theme_name == "Dark"

    def stylesheet(self):
        """Base QSS for the calculator window."""
        c = self.colors
        return f"""
            QWidget {{ background: {c['bg_primary']}; color: {c['text_primary']}; }}
            QGroupBox {{
                background: {c['bg_secondary']};
                border: 1px solid {c['border']};
                border-radius: 8px;
                margin-top: 14px;
                padding: 8px;
            }}
            QLineEdit, QComboBox {{
                background: {c['input_bg']};
                border: 1px solid {c['border']};
                border-radius: 4px;
                padding: 4px;
            }}
            QPushButton {{
                background: {c['accent']};
                color: #FFFFFF;
                border: none;
                border-radius: 6px;
                padding: 6px 14px;
            }}
            QPushButton:hover {{ background: {c['accent_hover']}; }}
        """
