"""Map API creature names onto the names the artwork generator accepts."""

from __future__ import annotations


# Creatures whose API name is a form ("deoxys-normal") or whose base name
# itself contains a hyphen ("mr-mime").
NAME_OVERRIDES: dict[int, str] = {
    29: "nidoran-f",
    32: "nidoran-m",
    122: "mr-mime",
    386: "deoxys",
    413: "wormadam",
    487: "giratina",
    492: "shaymin",
    550: "basculin",
    555: "darmanitan",
    641: "tornadus",
    642: "thundurus",
    645: "landorus",
    647: "keldeo",
    648: "meloetta",
    678: "meowstic",
    681: "aegislash",
    710: "pumpkaboo",
    711: "gourgeist",
    718: "zygarde",
    741: "oricorio",
    745: "lycanroc",
    746: "wishiwashi",
    774: "minior",
    778: "mimikyu",
    849: "toxtricity",
    875: "eiscue",
    876: "indeedee",
    877: "morpeko",
    892: "urshifu",
    902: "basculegion",
}


def strip_form(name: str) -> str:
    return name.split("-", 1)[0]


def artwork_name(pokemon_id: int, api_name: str) -> str:
    override = NAME_OVERRIDES.get(pokemon_id)
    if override is not None:
        return override
    return strip_form(api_name)
