"""Sample seed records shaped like the JSON input files"""


def make_plugin(name, tier=1, options=None, **overrides):
    record = {
        'name': name,
        'title': name.replace('-', ' ').title(),
        'description': f"{name} description",
        'imageUrl': f"https://cdn.example.com/{name}.png",
        'videoUrl': f"https://cdn.example.com/{name}.mp4",
        'topPick': False,
        'tier': tier,
        'priceDetails': {'month': 100, 'threeMonth': 250, 'year': 900},
        'configurationOptions': options if options is not None else [
            {
                'name': 'mode',
                'section': 'general',
                'description': 'Run mode',
                'type': 'select',
                'isBool': False,
                'values': ['a', 'b', 'c'],
            }
        ],
    }
    record.update(overrides)
    return record


def make_pack(name, plugins, **overrides):
    record = {
        'name': name,
        'title': name.replace('-', ' ').title(),
        'description': f"{name} bundle",
        'imageUrl': f"https://cdn.example.com/packs/{name}.png",
        'discount': 0.1,
        'active': True,
        'plugins': plugins,
        'priceDetails': {'month': 500, 'threeMonth': 1400, 'year': 5000},
    }
    record.update(overrides)
    return record
