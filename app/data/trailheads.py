# Oahu trailheads offered as autocomplete suggestions. Seeded once into an empty table.

PREDEFINED_TRAILHEADS = [
    ("Aiea Loop (upper)", 21.39880, -157.90022),
    ("Aihualama (Lyon Arboretum)", 21.3323, -157.8016),
    ("Bowman (Radar Hill)", 21.34992, -157.87685),
    ("Crouching Lion (Manamana)", 21.55816, -157.86619),
    ("Diamond Head Crater (Le'ahi)", 21.26360, -157.80603),
    ("Ehukai Pillbox (Sunset Pillbox)", 21.66465, -158.04936),
    ("Friendship Garden", 21.40622, -157.77751),
    ("Haha'ione", 21.310139, -157.712835),
    ("Hamana Falls", 21.45293, -157.85281),
    ("Hau'ula Loop", 21.60980, -157.91544),
    ("Hawaii Loa Ridge", 21.29749, -157.74593),
    ("Ho'omaluhia Botanical Garden", 21.38647, -157.80956),
    ("Judd", 21.34717, -157.82082),
    ("Ka'au Crater", 21.31108, -157.78189),
    ("Ka'ena Point (Mokule'ia Side)", 21.57976, -158.23773),
    ("Ka'ena Point (Waianae Side)", 21.55673, -158.24884),
    ("Kahana Valley", 21.55023, -157.88163),
    ("Kahekili Ridge", 21.55410, -157.85579),
    ("Kaipapa'u Gulch", 21.61809, -157.91893),
    ("Ka'iwa Ridge (Lanikai Side)", 21.39031, -157.71943),
    ("Ka'iwa Ridge (Keolu Side)", 21.38174, -157.72553),
    ("Kalawahine", 21.33125, -157.82128),
    ("Kamana'iki", 21.34960, -157.85821),
    ("Kamilo'iki", 21.300515, -157.692755),
    ("Kaniakapupu Ruins", 21.351083, -157.81698),
    ("Kapa'ele'ele", 21.55501, -157.87682),
    ("Kapena Falls", 21.32401, -157.84699),
    ("Kaunala", 21.64290, -158.02590),
    ("Kealia", 21.57750, -158.20816),
    ("Kea'au Middle Ridge", 21.50296, -158.22544),
    ("Koko Crater (Arch)", 21.28069, -157.67854),
    ("Koko Crater (Railway)", 21.28117, -157.69192),
    ("Koko Head (Hanauma)", 21.27532, -157.69363),
    ("Koloa Gulch", 21.62817, -157.923531),
    ("Kuliʻouʻou Ridge", 21.30343, -157.72426),
    ("Kulepeamoa Ridge", 21.29218, -157.74093),
    ("Laie Falls (parking)", 21.65053, -157.93147),
    ("Lanihuli", 21.33986, -157.84751),
    ("Lanipo", 21.29787, -157.78574),
    ("Likeke Falls (First Pres)", 21.37281, -157.79209),
    ("Lulumahu Falls", 21.354438, -157.81114),
    ("Makapu'u Point Lighthouse", 21.30499, -157.65480),
    ("Makiki Valley Loop (Nature Center)", 21.31717, -157.82700),
    ("Manana Ridge", 21.43038, -157.93889),
    ("Manoa Cliff", 21.32612, -157.81308),
    ("Manoa Falls", 21.33255, -157.80055),
    ("Maunawili Falls", 21.35929, -157.76355),
    ("Maunawili Demonstration (Pali)", 21.36496, -157.77998),
    ("Maunawili Ditch (Wakupanaha)", 21.34294, -157.74341),
    ("Maunawili Ditch (Mahiku)", 21.34918, -157.73400),
    ("Moanalua Valley", 21.37412, -157.88061),
    ("Mount Ka'ala", 21.47597, -158.15193),
    ("Nahuina", 21.32978, -158.82265),
    ("Ohana Bike (N)", 21.37203, -157.74520),
    ("Ohana Bike (S)", 21.35772, -157.73318),
    ("Olomana", 21.36845, -157.76097),
    ("Pali Notches", 21.36670, -157.79322),
    ("Pali Puka", 21.36682, -157.79417),
    ("Puʻu Māʻeliʻel", 21.43429, -157.82463),
    ("Pu'u Manamana", 21.55410, -157.85579),
    ("Pu'u Ohia", 21.33109, -157.81465),
    ("Pu'u O Hulu (Pink Pillbox)", 21.40478, -158.17268),
    ("Pu'u Pia Trail", 21.32168, -157.79873),
    ("Tantalus Arboretum", 21.32582, -157.82771),
    ("Tom Tom", 21.32499, -157.69683),
    ("Ualakaa", 21.31645, -157.82037),
    ("Wa'ahila Ridge", 21.30729, -157.79765),
    ("Wahiawa Hills", 21.50846, -157.98648),
    ("Waiau (parking)", 21.41257, -157.93985),
    ("Wailupe Valley (Hao)", 21.29861, -157.75663),
    ("Wailupe Valley (Mona)", 21.29999, -157.75466),
    ("Waimalu Ditch", 21.39888, -157.91763),
    ("Waimano Ridge", 21.41725, -157.95104),
    ("Waipuilani Falls", 21.3643, -157.7959),
    ("Waipuhia Falls", 21.36173, -157.80544),
    ("Wiliwilinui Ridge", 21.29927, -157.76274),
]
