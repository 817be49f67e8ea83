"""
Bundled reference catalog: the 24 ghost types and their evidence.

Records use the same shape as a JSON catalog file, so the bundled data
goes through exactly the same loader as user-supplied catalogs.
"""

GHOST_RECORDS = [
    {
        "id": "spirit",
        "name": "Spirit",
        "evidence": ["EMF Level 5", "Spirit Box", "Ghost Writing"],
        "difficulty": "Beginner",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Normal",
        "activity_level": "Very High",
        "description": "The most commonly encountered ghost. Very active and prone to poltergeist activity.",
    },
    {
        "id": "wraith",
        "name": "Wraith",
        "evidence": ["EMF Level 5", "Spirit Box", "D.O.T.S. Projector"],
        "difficulty": "Intermediate",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Fast",
        "activity_level": "High",
        "description": "Fears salt and is the only ghost that levitates.",
    },
    {
        "id": "phantom",
        "name": "Phantom",
        "evidence": ["Spirit Box", "Ultraviolet", "D.O.T.S. Projector"],
        "difficulty": "Intermediate",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Normal",
        "activity_level": "High",
        "description": "Can possess the living. Looking at a Phantom drains sanity.",
    },
    {
        "id": "poltergeist",
        "name": "Poltergeist",
        "evidence": ["Spirit Box", "Ultraviolet", "Ghost Writing"],
        "difficulty": "Beginner",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Normal",
        "activity_level": "Very High",
        "description": "A loud physical manifestation that throws objects violently.",
    },
    {
        "id": "banshee",
        "name": "Banshee",
        "evidence": ["Ghost Orb", "Ultraviolet", "D.O.T.S. Projector"],
        "difficulty": "Intermediate",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Normal",
        "activity_level": "Medium",
        "description": "Targets one player at a time and is known for its high-pitched scream.",
    },
    {
        "id": "jinn",
        "name": "Jinn",
        "evidence": ["EMF Level 5", "Ultraviolet", "Freezing Temperatures"],
        "difficulty": "Intermediate",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Variable",
        "activity_level": "High",
        "description": "Territorial and fast while the breaker is on.",
    },
    {
        "id": "mare",
        "name": "Mare",
        "evidence": ["Ghost Orb", "Spirit Box", "Ghost Writing"],
        "difficulty": "Beginner",
        "hunt_sanity_threshold": 60,
        "movement_speed": "Normal",
        "activity_level": "High",
        "description": "The source of nightmares. Turns lights off to scare its prey.",
    },
    {
        "id": "revenant",
        "name": "Revenant",
        "evidence": ["Ghost Orb", "Freezing Temperatures", "Ghost Writing"],
        "difficulty": "Advanced",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Variable",
        "activity_level": "Medium",
        "description": "Slow while searching, very fast once it sees a target.",
    },
    {
        "id": "shade",
        "name": "Shade",
        "evidence": ["EMF Level 5", "Freezing Temperatures", "Ghost Writing"],
        "difficulty": "Beginner",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Normal",
        "activity_level": "Low",
        "description": "A shy ghost that hides when players are grouped together.",
    },
    {
        "id": "demon",
        "name": "Demon",
        "evidence": ["Freezing Temperatures", "Ultraviolet", "Ghost Writing"],
        "difficulty": "Expert",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Normal",
        "activity_level": "Very High",
        "description": "Extremely aggressive and can hunt at any sanity level.",
    },
    {
        "id": "yurei",
        "name": "Yurei",
        "evidence": ["Ghost Orb", "Freezing Temperatures", "D.O.T.S. Projector"],
        "difficulty": "Intermediate",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Normal",
        "activity_level": "High",
        "description": "Slams doors and drains the sanity of nearby players.",
    },
    {
        "id": "oni",
        "name": "Oni",
        "evidence": ["EMF Level 5", "Freezing Temperatures", "D.O.T.S. Projector"],
        "difficulty": "Intermediate",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Normal",
        "activity_level": "Very High",
        "description": "Very active, and stronger when ghost events occur near players.",
    },
    {
        "id": "yokai",
        "name": "Yokai",
        "evidence": ["Ghost Orb", "Spirit Box", "D.O.T.S. Projector"],
        "difficulty": "Intermediate",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Normal",
        "activity_level": "High",
        "description": "Attracted to human voices and hunts earlier when players talk.",
    },
    {
        "id": "hantu",
        "name": "Hantu",
        "evidence": ["Ghost Orb", "Ultraviolet", "Freezing Temperatures"],
        "difficulty": "Intermediate",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Variable",
        "activity_level": "High",
        "description": "Moves faster in colder rooms and slower in warm ones.",
    },
    {
        "id": "goryo",
        "name": "Goryo",
        "evidence": ["EMF Level 5", "Ultraviolet", "D.O.T.S. Projector"],
        "difficulty": "Advanced",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Normal",
        "activity_level": "Medium",
        "description": "Only shows on D.O.T.S. through a camera when nobody is in the room.",
    },
    {
        "id": "myling",
        "name": "Myling",
        "evidence": ["EMF Level 5", "Ultraviolet", "Ghost Writing"],
        "difficulty": "Beginner",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Normal",
        "activity_level": "Very High",
        "description": "Very vocal, with quiet footsteps during hunts.",
    },
    {
        "id": "onryo",
        "name": "Onryo",
        "evidence": ["Ghost Orb", "Spirit Box", "Freezing Temperatures"],
        "difficulty": "Intermediate",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Normal",
        "activity_level": "High",
        "description": "Compelled to hunt when several flames are extinguished nearby.",
    },
    {
        "id": "the-twins",
        "name": "The Twins",
        "evidence": ["EMF Level 5", "Spirit Box", "Freezing Temperatures"],
        "difficulty": "Advanced",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Variable",
        "activity_level": "Very High",
        "description": "A pair of ghosts, one fast and one slow, that may act separately.",
    },
    {
        "id": "raiju",
        "name": "Raiju",
        "evidence": ["EMF Level 5", "Ghost Orb", "D.O.T.S. Projector"],
        "difficulty": "Intermediate",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Variable",
        "activity_level": "High",
        "description": "Feeds on electrical activity and speeds up near active equipment.",
    },
    {
        "id": "obake",
        "name": "Obake",
        "evidence": ["EMF Level 5", "Ghost Orb", "Ultraviolet"],
        "difficulty": "Advanced",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Normal",
        "activity_level": "Medium",
        "description": "A shapeshifter that can leave six-fingered handprints.",
    },
    {
        "id": "the-mimic",
        "name": "The Mimic",
        "evidence": ["Spirit Box", "Ultraviolet", "Freezing Temperatures"],
        "difficulty": "Expert",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Variable",
        "activity_level": "High",
        "description": "Copies the abilities of other ghosts and always shows ghost orbs.",
    },
    {
        "id": "moroi",
        "name": "Moroi",
        "evidence": ["Spirit Box", "Freezing Temperatures", "Ghost Writing"],
        "difficulty": "Advanced",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Variable",
        "activity_level": "High",
        "description": "Curses players through the spirit box, draining sanity faster.",
    },
    {
        "id": "deogen",
        "name": "Deogen",
        "evidence": ["Spirit Box", "Ghost Writing", "D.O.T.S. Projector"],
        "difficulty": "Expert",
        "hunt_sanity_threshold": 40,
        "movement_speed": "Variable",
        "activity_level": "High",
        "description": "Always knows where players are, but slows down when close.",
    },
    {
        "id": "thaye",
        "name": "Thaye",
        "evidence": ["Ghost Orb", "Ghost Writing", "D.O.T.S. Projector"],
        "difficulty": "Beginner",
        "hunt_sanity_threshold": 50,
        "movement_speed": "Variable",
        "activity_level": "Variable",
        "description": "Ages over the course of an investigation, growing calmer.",
    },
]
