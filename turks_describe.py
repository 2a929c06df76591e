from turkshead import TurksHead


def count_crossings(leads, bights):
    # Each bight carries one crossing per lead boundary
    return bights * (leads - 1)


def generate_turkshead_description(knot: TurksHead):
    crossings = count_crossings(knot.leads, knot.bights)

    description = f"This Turk's head has {knot.leads} lead{'s' if knot.leads > 1 else ''} and {knot.bights} bight{'s' if knot.bights > 1 else ''}. "

    if knot.paths == 1:
        description += "Leads and bights are coprime, so a single continuous strand traces the whole knot. "
    else:
        description += f"Leads and bights share a factor of {knot.paths}, so the figure is a link of {knot.paths} identical strands, each rotated by {360 / knot.paths:g} degrees from the next. "

    description += f"The weave alternates over and under through {crossings} crossing{'s' if crossings != 1 else ''}. "

    band = knot.outer_radius - knot.inner_radius
    if knot.line_width >= band:
        description += "The line is as wide as the band it sits in, so neighbouring strands will merge. "
    elif knot.line_width > band / 4:
        description += "The line is thick compared to the band, giving a dense braid. "
    else:
        description += "The line is thin compared to the band, leaving open space between strands. "

    return description


def describe_turkshead(knot: TurksHead):
    return {
        "leads": knot.leads,
        "bights": knot.bights,
        "paths": knot.paths,
        "max_theta": knot.max_theta,
        "crossings": count_crossings(knot.leads, knot.bights),
        "is_knot": knot.paths == 1,
        "description": generate_turkshead_description(knot),
    }
