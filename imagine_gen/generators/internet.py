from __future__ import annotations
import math
from typing import Optional, Sequence

from imagine_gen.core.rng import Seed, rng_from
from imagine_gen.core.seed import get_global_rng
from imagine_gen.generators.ids import slug

BROWSERS = ["Chrome", "Firefox", "Safari", "Edge"]
PLATFORMS = [
    "Windows NT 10.0",
    "Macintosh; Intel Mac OS X 13_5",
    "X11; Linux x86_64",
    "iPhone; CPU iPhone OS 16_5 like Mac OS X",
]


def ip(*, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    return ".".join(str(math.floor(rng.next() * 256)) for _ in range(4))


def ipv6(*, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    return ":".join(f"{math.floor(rng.next() * 0xFFFF):04x}" for _ in range(8))


def domain(tld: Optional[str] = None, *, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    name = slug(2, seed=rng.child_seed())
    t = tld[1:] if tld and tld.startswith(".") else tld
    return f"{name}.{t or 'com'}"


def url(protocols: Optional[Sequence[str]] = None, *, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    proto = rng.pick(list(protocols) if protocols else ["https", "http"])
    host = domain(seed=rng.child_seed())
    path = slug(2 + math.floor(rng.next() * 2), seed=rng.child_seed()).replace("-", "/")
    return f"{proto}://{host}/{path}"


def mac(*, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    return ":".join(f"{math.floor(rng.next() * 256):02x}" for _ in range(6))


def user_agent(*, seed: Optional[Seed] = None) -> str:
    """Plausible Chrome, Firefox, Safari or Edge user agent string."""
    rng = rng_from(seed, get_global_rng())
    browser = rng.pick(BROWSERS)
    platform = rng.pick(PLATFORMS)
    ver = f"{math.floor(60 + rng.next() * 40)}.0.{math.floor(rng.next() * 4000)}"
    if browser == "Safari":
        major = math.floor(16 + rng.next() * 4)
        return (f"Mozilla/5.0 ({platform}) AppleWebKit/605.1.15 (KHTML, like Gecko) "
                f"Version/{major}.0 Safari/605.1.15")
    if browser == "Firefox":
        rv = math.floor(90 + rng.next() * 20)
        return f"Mozilla/5.0 ({platform}; rv:{rv}.0) Gecko/20100101 Firefox/{ver}"
    if browser == "Edge":
        return (f"Mozilla/5.0 ({platform}) AppleWebKit/537.36 (KHTML, like Gecko) "
                f"Chrome/{ver} Safari/537.36 Edg/{ver}")
    return f"Mozilla/5.0 ({platform}) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/{ver} Safari/537.36"
