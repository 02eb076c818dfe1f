# File: src/combodrill/utilities/stratagems.py
"""
Built-in combo library.
Used whenever no user combo file is present. Same schema as the JSON file:
a list of {"name": str, "sequence": str} records, codes U/D/L/R.
"""

# =================================
#     --- SUPPORT WEAPONS ---
# =================================
SUPPORT = [
    {"name": "Machine Gun", "sequence": "DLDUR"},
    {"name": "Anti-Materiel Rifle", "sequence": "DLRUD"},
    {"name": "Stalwart", "sequence": "DLDUUL"},
    {"name": "Expendable Anti-Tank", "sequence": "DDLUR"},
    {"name": "Recoilless Rifle", "sequence": "DLRRL"},
    {"name": "Flamethrower", "sequence": "DLUDU"},
    {"name": "Autocannon", "sequence": "DLDUUR"},
    {"name": "Railgun", "sequence": "DRDULR"},
    {"name": "Spear", "sequence": "DDUDD"},
    {"name": "Grenade Launcher", "sequence": "DLULD"},
    {"name": "Laser Cannon", "sequence": "DLDUL"},
    {"name": "Quasar Cannon", "sequence": "DDULR"},
]

# =================================
#      --- ORBITAL STRIKES ---
# =================================
ORBITAL = [
    {"name": "Orbital Gatling Barrage", "sequence": "RDLUU"},
    {"name": "Orbital Airburst Strike", "sequence": "RRR"},
    {"name": "Orbital 120MM HE Barrage", "sequence": "RRDLRD"},
    {"name": "Orbital 380MM HE Barrage", "sequence": "RDUULDD"},
    {"name": "Orbital Walking Barrage", "sequence": "RDRDRD"},
    {"name": "Orbital Laser", "sequence": "RDURD"},
    {"name": "Orbital Railcannon Strike", "sequence": "RUDDR"},
    {"name": "Orbital Precision Strike", "sequence": "RRU"},
    {"name": "Orbital Gas Strike", "sequence": "RRDR"},
    {"name": "Orbital EMS Strike", "sequence": "RRLD"},
    {"name": "Orbital Smoke Strike", "sequence": "RRDU"},
]

# =================================
#       --- EAGLE STRIKES ---
# =================================
EAGLE = [
    {"name": "Eagle Strafing Run", "sequence": "URR"},
    {"name": "Eagle Airstrike", "sequence": "URDR"},
    {"name": "Eagle Cluster Bomb", "sequence": "URDDR"},
    {"name": "Eagle Napalm Airstrike", "sequence": "URDU"},
    {"name": "Eagle Smoke Strike", "sequence": "URUD"},
    {"name": "Eagle 110MM Rocket Pods", "sequence": "URUL"},
    {"name": "Eagle 500KG Bomb", "sequence": "URDDD"},
]

# =================================
#         --- MISSION ---
# =================================
MISSION = [
    {"name": "Reinforce", "sequence": "UDRLU"},
    {"name": "Resupply", "sequence": "DDUR"},
    {"name": "SOS Beacon", "sequence": "UDRU"},
    {"name": "Hellbomb", "sequence": "DULDURDU"},
    {"name": "SEAF Artillery", "sequence": "RUUD"},
    {"name": "Super Earth Flag", "sequence": "DUDU"},
]

BUILTIN_COMBOS = SUPPORT + ORBITAL + EAGLE + MISSION
