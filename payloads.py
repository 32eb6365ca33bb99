import copy

from grammar import AnalyticsType

SVA_PATH = "/api/v2/smart_va/analytics"
OD_PATH = "/api/v2/object_in_zone/analytics"

DEFAULT_PERMISSIONS = {
    "StartAnalytics": True,
    "StopAnalytics": True,
    "EditAnalytics": True,
    "ViewAnalyticsLive": True,
    "ViewAnalyticsEvents": True,
}

ACCESS_RESTRICTIONS = {
    "role_permissions": {},
    "user_permissions": {},
    "default_permissions": DEFAULT_PERMISSIONS,
}

SVA_TEMPLATE = {
    "type": "smart_va",
    "stream_id": None,
    "allowed_server_ids": None,
    "module": {
        "advanced_settings": {
            "tracker": "normal",
            "sensitivity": 5,
            "model": "performance",
            "tracker_buffer_time": 10,
            "min_width": 25,
            "min_height": 25,
        },
        "hardware_settings": {
            "acceleration": "",
            "decoding": "nvidia",
            "hardware": "gpu",
            "frame_rate_settings": {"mode": "fps", "fps": "5"},
            "motion": False,
        },
        "mode": "alert",
        "rules": [],
    },
    "events_holder": {"notify_enabled": False, "events": []},
    "access_restrictions": ACCESS_RESTRICTIONS,
}

OD_TEMPLATE = {
    "type": "object_in_zone",
    "stream_id": None,
    "allowed_server_ids": None,
    "module": {
        "advanced_settings": {
            "tracker": "normal",
            "alarm_filtration": True,
            "sensitivity": 5,
            "model": "quality",
            "tracker_buffer_time": 20,
            "min_width": 25,
            "min_height": 25,
        },
        "hardware_settings": {
            "acceleration": "",
            "decoding": "nvidia",
            "hardware": "gpu",
            "frame_rate_settings": {"mode": "fps", "fps": "10"},
            "motion": False,
        },
        "excluded_crossing": 8,
        "mode": "alert",
        "zone_crossing": 8,
        "polygons": [
            {
                # почти весь кадр, координаты нормированы
                "points": [
                    {"x": "0.0078", "y": "0.0139"},
                    {"x": "0.9922", "y": "0.0139"},
                    {"x": "0.9922", "y": "0.9861"},
                    {"x": "0.0078", "y": "0.9861"},
                ],
                "types": ["0"],
                "time_periods": [
                    {
                        "start_time": "00:00:00",
                        "end_time": "23:59:59",
                        "trigger": 6,
                        "dwell_time": "5",
                        "object_counter_limit": "1",
                        "selected_days": [0, 1, 2, 3, 4, 5, 6],
                    }
                ],
                "color": "#A347FF",
                "name": "Rule 1",
                "excluded": [],
            }
        ],
    },
    # здесь 0, в SVA - false
    "events_holder": {"notify_enabled": 0, "events": []},
    "access_restrictions": ACCESS_RESTRICTIONS,
}

_TEMPLATES = {
    AnalyticsType.SVA: (SVA_PATH, SVA_TEMPLATE),
    AnalyticsType.OD: (OD_PATH, OD_TEMPLATE),
}


def endpoint_for(analytics_type, base_url):
    path, _ = _TEMPLATES[analytics_type]
    return base_url.rstrip("/") + path


def build_payload(analytics_type, stream_id):
    _, template = _TEMPLATES[analytics_type]
    payload = copy.deepcopy(template)
    payload["stream_id"] = int(stream_id)
    return payload
