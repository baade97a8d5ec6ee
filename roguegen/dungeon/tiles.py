# Cell codes, stored as character codes so the mesh serializes to the same
# integers the map service has always emitted.
BLANK = ord(" ")
FLOOR = ord(".")
CORRIDOR = ord("#")
VWALL = ord("|")
HWALL = ord("-")
DOOR = ord("+")
TEMPORARY = ord("T")  # generation-time marker, never present in a finished mesh

CELL_CHARS = {
    BLANK: " ",
    FLOOR: ".",
    CORRIDOR: "#",
    VWALL: "|",
    HWALL: "-",
    DOOR: "+",
}

__all__ = ["BLANK", "FLOOR", "CORRIDOR", "VWALL", "HWALL", "DOOR", "TEMPORARY", "CELL_CHARS"]
