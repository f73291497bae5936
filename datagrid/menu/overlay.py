"""
Context Menu Overlay - renders the menu as a fixed-position HTML layer.

The menu is drawn at the literal pointer position handed in by the host and
removes itself through the host's on_close callback.
"""

from nicegui import ui

from datagrid.menu.model import ContextMenuOverlay, MenuOption


def _option_classes(option: MenuOption) -> str:
    if option.disabled:
        tone = 'opacity-50 cursor-not-allowed text-gray-700'
    elif option.danger:
        tone = 'text-red-700 hover:bg-red-50 cursor-pointer'
    else:
        tone = 'text-gray-700 hover:bg-gray-100 cursor-pointer'
    return f'w-full flex items-center justify-between px-4 py-2 text-sm text-left transition-colors {tone}'


def render_context_menu(overlay: ContextMenuOverlay):
    """Render ``overlay`` and bind activation and pointer-exit to it."""
    container = ui.element('div').classes(
        'bg-white rounded-lg shadow-lg border border-gray-200 py-1'
    ).style(overlay.style)
    container.on('mouseleave', lambda _: overlay.pointer_exit())

    with container:
        for index, option in enumerate(overlay.options):
            if option.divider:
                ui.element('div').classes('border-t border-gray-100 my-1')
                continue

            row = ui.element('div').classes(_option_classes(option))
            with row:
                ui.label(option.label)
                if option.shortcut:
                    ui.label(option.shortcut).classes('text-xs text-gray-400 ml-4')
            if option.actionable:
                row.on('click', lambda _, i=index: overlay.activate(i))
    return container
