"""
Price Lookup Vending Machine - desktop front end

Type an amount, press an item button (or name any other item) and the
machine's answer is shown underneath.
"""


import FreeSimpleGUI as sg

from vending_machine import VendingMachine, log

BACKGROUND = '#0A1931'
ACCENT = '#2196F3'
TEXT_DARK = '#1A335F'
TITLE_FONT = ("Helvetica", 24)
BUTTON_FONT = ("Helvetica", 18)

BAD_MONEY = "Enter a whole number amount."


def build_layout():
    money_col = []
    money_col.append([sg.Text("Insert Money", font=TITLE_FONT, background_color=ACCENT, text_color='black', pad=(10, 10))])
    money_col.append([sg.Input("0", key='MONEY', size=(10, 1), font=BUTTON_FONT)])

    select_col = []
    select_col.append([sg.Text("Select Item", font=TITLE_FONT, background_color=ACCENT, text_color='black', pad=(10, 10))])
    for name, price in VendingMachine.PRODUCTS.items():
        button_text = f"{name.capitalize()}\n({price})"
        select_col.append([sg.Button(button_text, key=name, size=(15, 2), font=BUTTON_FONT, button_color=(TEXT_DARK, ACCENT))])
    select_col.append([
        sg.Input("", key='ITEM', size=(12, 1), font=BUTTON_FONT),
        sg.Button("Other Item", key='OTHER', font=BUTTON_FONT, button_color=(TEXT_DARK, ACCENT)),
    ])

    layout = [
        [
            sg.Column(money_col, vertical_alignment="TOP", element_justification='c', background_color=BACKGROUND, pad=(20, 20)),
            sg.VSeparator(),
            sg.Column(select_col, vertical_alignment="TOP", element_justification='c', background_color=BACKGROUND, pad=(20, 20)),
        ],
        [sg.HorizontalSeparator()],
        [sg.Text("", key='RESULT', size=(50, 2), font=BUTTON_FONT, background_color=BACKGROUND, text_color='white')],
    ]
    return layout


def read_money(values):
    """Whole-number amount from the money entry, or None if it isn't one."""
    raw = str(values.get('MONEY', '')).strip()
    try:
        return int(raw)
    except ValueError:
        return None


def handle_event(machine, event, values):
    if event in machine.PRODUCTS:
        item = event
    elif event == 'OTHER':
        item = values.get('ITEM', '')
    else:
        return None

    money = read_money(values)
    log(f"Event {event!r}: item {item!r}, money {money}")
    if money is None:
        return BAD_MONEY
    return machine.dispense_item(money, item)


def main():
    machine = VendingMachine()
    sg.theme_background_color(TEXT_DARK)
    window = sg.Window('Price Lookup Vending Machine', build_layout(), background_color=BACKGROUND, finalize=True)

    while True:
        event, values = window.read(timeout=10)

        if event in (sg.WIN_CLOSED, 'Exit'):
            break

        message = handle_event(machine, event, values)
        if message is not None:
            window['RESULT'].update(message)

    window.close()
    print("Normal exit")


if __name__ == "__main__":
    main()
