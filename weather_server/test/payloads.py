SLOTS = [
    ("2026-10-19 18:00:00", "2026-10-20 06:00:00"),
    ("2026-10-20 06:00:00", "2026-10-20 18:00:00"),
]

TAIPEI_VALUES = {
    "Wx": "晴時多雲",
    "PoP": "20",
    "MinT": "22",
    "MaxT": "29",
    "CI": "舒適",
    "WS": "<=1",
}


def build_element(name, values, slots=SLOTS):
    if isinstance(values, str):
        values = [values] * len(slots)
    return {
        "elementName": name,
        "time": [
            {"startTime": start, "endTime": end, "parameter": {"parameterName": value}}
            for (start, end), value in zip(slots, values)
        ],
    }


def build_payload(location_name="臺北市", values=None, extra_elements=(), slots=SLOTS,
                  issue_time="2026-10-19 17:00:00"):
    values = TAIPEI_VALUES if values is None else values
    elements = [build_element(name, value, slots) for name, value in values.items()]
    elements.extend(extra_elements)
    return {
        "success": "true",
        "records": {
            "issueTime": issue_time,
            "location": [{"locationName": location_name, "weatherElement": elements}],
        },
    }
