import logging
import sys
from collections import namedtuple

import requests

from config import VA_REQUEST_TIMEOUT, VA_SERVER_URL
from errors import DispatchError, NonSuccessStatusError, TransportFailureError
from payloads import build_payload, endpoint_for

logger = logging.getLogger("va_creator")

DispatchOutcome = namedtuple("DispatchOutcome", ["stream_id", "ok", "reason"])


def create_analytics(token, stream_id, analytics_type, base_url=VA_SERVER_URL, timeout=VA_REQUEST_TIMEOUT):
    """
    Один POST на сервер видеоаналитики.
    - 2xx → просто возврат;
    - другой статус → NonSuccessStatusError (с телом ответа);
    - сетевая ошибка/таймаут → TransportFailureError.
    """
    url = endpoint_for(analytics_type, base_url)
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {token}",
    }
    payload = build_payload(analytics_type, stream_id)

    try:
        resp = requests.post(url, json=payload, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        logger.exception(f"Transport failure for stream_id={stream_id} url={url}")
        raise TransportFailureError(stream_id, str(e)) from e

    logger.info(f"POST {url} stream_id={stream_id} -> {resp.status_code}")
    if not 200 <= resp.status_code < 300:
        raise NonSuccessStatusError(stream_id, resp.status_code, resp.text)
    return resp


def dispatch_all(token, stream_ids, analytics_type, base_url=VA_SERVER_URL, timeout=VA_REQUEST_TIMEOUT):
    # строго по очереди; ошибка одного id не останавливает остальные
    outcomes = []
    for stream_id in stream_ids:
        try:
            create_analytics(token, stream_id, analytics_type, base_url=base_url, timeout=timeout)
        except NonSuccessStatusError as e:
            logger.warning(f"stream_id={stream_id} rejected: HTTP {e.status_code}")
            print(f"Failed to create analytics for stream {stream_id}. HTTP status: {e.status_code}", file=sys.stderr)
            print(f"Response body: {e.body}", file=sys.stderr)
            outcomes.append(DispatchOutcome(stream_id, False, str(e)))
        except DispatchError as e:
            print(f"Failed to create analytics for stream {stream_id}: {e}", file=sys.stderr)
            outcomes.append(DispatchOutcome(stream_id, False, str(e)))
        else:
            print(f"Successfully created analytics for stream {stream_id}.")
            outcomes.append(DispatchOutcome(stream_id, True, None))
    return outcomes
