# Design tokens for the focus timer UI

COLORS = {
    'text_strong': '#133A62',
    'footer_bg': '#E7F0FF',
    'footer_text': '#133A62',
    'chart_bar': '#8FAEC4',
    'chart_edge': '#7B9BB0',
}

# Accent per session mode, keyed by SessionMode value
MODE_COLORS = {
    'work': '#4F6BED',
    'shortBreak': '#22A06B',
    'longBreak': '#A855F7',
}
