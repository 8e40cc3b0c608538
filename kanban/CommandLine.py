import argparse
import logging
import sys

from kanban.Interface import Interface
from kanban.Resolver import DISTANCE_OFFSET
from kanban.Session import DragController

ROW_HEIGHT = 100
CELL_WIDTH = 24


class RowLayout:
    """Every slot of a column is ROW_HEIGHT tall, starting at y=0."""

    def __init__(self, controller: DragController):
        self.controller = controller

    def __call__(self, indicator):
        ids = [c.id for c in self.controller.cardsInColumn(indicator.column)]
        if indicator.beforeId in ids:
            return ids.index(indicator.beforeId) * ROW_HEIGHT
        return len(ids) * ROW_HEIGHT


class CommandLineInterface(Interface):

    def cell(self, text, marked=False):
        text = ("> " if marked else "  ") + text
        if len(text) > CELL_WIDTH - 1:
            text = text[:CELL_WIDTH - 2] + "~"
        return text.ljust(CELL_WIDTH)

    def printAll(self):
        controller = self.controller
        header = ""
        for column in controller.columns:
            title = f"{column.title} ({len(controller.cardsInColumn(column.id))})"
            if controller.isColumnHighlighted(column.id):
                title = "*" + title
            header += self.cell(title)
        print(header)
        print("-" * (CELL_WIDTH * len(controller.columns)))
        i = 0
        while True:
            has = False
            line = ""
            for column in controller.columns:
                cards = controller.cardsInColumn(column.id)
                indicators = controller.indicatorsFor(column.id)
                if i < len(cards):
                    has = True
                    line += self.cell(str(cards[i]), indicators[i].highlighted)
                elif i == len(cards) and indicators[-1].highlighted:
                    has = True
                    line += self.cell("(end)", True)
                else:
                    line += self.cell("")
            if not has:
                break
            print(f"y={i * ROW_HEIGHT:<5}" + line)
            i += 1
        burn = "[armed]" if controller.discardArmed else "[idle]"
        dragging = controller.draggedCardId()
        print(f"Discard {burn}" + (f"   dragging {dragging}" if dragging is not None else ""))
        print()

    def onStart(self):
        print("Board ready. Type 'help' for commands.")
        self.printAll()

    def onEvent(self, event):
        print(event.describe())
        super().onEvent(event)

    def notifyRedraw(self):
        self.printAll()


def printHelp():
    print("Commands:")
    print("  show                   Print the board")
    print("  drag <id>              Pick up a card")
    print("  over <column> <y>      Move the pointer over a column")
    print("  leave <column>         Move the pointer out of a column")
    print("  drop <column> [y]      Release over a column")
    print("  burn                   Release over the discard zone")
    print("  cancel                 Release outside any target")
    print("  add <column> <title>   Add a card at the end of a column")
    print("  quit                   Exit")


def handleCommand(controller: DragController, line: str) -> bool:
    tokens = line.split()
    if not tokens:
        return True
    cmd = tokens[0].lower()
    if cmd == "quit" or cmd == "exit":
        return False
    if cmd == "help":
        printHelp()
    elif cmd == "show":
        controller.interface.notifyRedraw()
    elif cmd == "drag" and len(tokens) == 2:
        if not controller.startDrag(tokens[1]):
            print("Cannot drag that card!")
    elif cmd == "over" and len(tokens) == 3:
        try:
            y = float(tokens[2])
        except ValueError:
            print("Invalid y!")
            return True
        if controller.dragOver(tokens[1], y) is None:
            print("Nothing is being dragged over that column!")
    elif cmd == "leave" and len(tokens) == 2:
        controller.dragLeave(tokens[1])
    elif cmd == "drop" and len(tokens) in (2, 3):
        y = None
        if len(tokens) == 3:
            try:
                y = float(tokens[2])
            except ValueError:
                print("Invalid y!")
                return True
        if not controller.drop(tokens[1], y):
            print("Nothing moved.")
    elif cmd == "burn":
        controller.discardOver()
        if not controller.dropOnDiscard():
            print("Nothing to discard.")
    elif cmd == "cancel":
        controller.cancel()
    elif cmd == "add" and len(tokens) >= 3:
        title = " ".join(tokens[2:]).strip()
        if controller.addCard(tokens[1], title) is None:
            print("Unknown column!")
    else:
        print("Invalid command!")
    return True


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Drive the kanban board with typed drag-and-drop commands.")
    parser.add_argument("--offset", type=int, default=DISTANCE_OFFSET, help="Resolver distance offset in pixels.")
    parser.add_argument("--log-level", type=str.upper, default="WARNING",
                        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"), help="Logging level.")
    return parser.parse_args(argv)


def main(argv=None):
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    controller = DragController(offset=args.offset)
    controller.setLayoutProvider(RowLayout(controller))
    controller.registerInterface(CommandLineInterface())
    controller.start()
    while True:
        try:
            line = input(": ")
        except (KeyboardInterrupt, EOFError):
            controller.cancel()
            break
        if not handleCommand(controller, line):
            break
    print("Goodbye.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
