"""Static district list: the 38 Tamil Nadu districts and Puducherry."""

from tamilpanchangam.models import Region

DEFAULT_REGION_NAME = "Chennai"

# Alphabetical by English name; Chennai sits at index 2.
REGIONS: tuple[Region, ...] = (
    Region("Ariyalur", "அரியலூர்", 11.1401, 79.0786),
    Region("Chengalpattu", "செங்கல்பட்டு", 12.6819, 79.9888),
    Region("Chennai", "சென்னை", 13.0827, 80.2707),
    Region("Coimbatore", "கோயம்புத்தூர்", 11.0168, 76.9558),
    Region("Cuddalore", "கடலூர்", 11.7480, 79.7714),
    Region("Dharmapuri", "தர்மபுரி", 12.1211, 78.1582),
    Region("Dindigul", "திண்டுக்கல்", 10.3673, 77.9803),
    Region("Erode", "ஈரோடு", 11.3410, 77.7172),
    Region("Kallakurichi", "கள்ளக்குறிச்சி", 11.7384, 78.9639),
    Region("Kanchipuram", "காஞ்சிபுரம்", 12.8342, 79.7036),
    Region("Kanyakumari", "கன்னியாகுமரி", 8.0883, 77.5385),
    Region("Karur", "கரூர்", 10.9601, 78.0766),
    Region("Krishnagiri", "கிருஷ்ணகிரி", 12.5266, 78.2150),
    Region("Madurai", "மதுரை", 9.9252, 78.1198),
    Region("Mayiladuthurai", "மயிலாடுதுறை", 11.1018, 79.6520),
    Region("Nagapattinam", "நாகப்பட்டினம்", 10.7672, 79.8449),
    Region("Namakkal", "நாமக்கல்", 11.2189, 78.1677),
    Region("Nilgiris", "நீலகிரி", 11.4064, 76.6932),
    Region("Perambalur", "பெரம்பலூர்", 11.2342, 78.8807),
    Region("Pudukkottai", "புதுக்கோட்டை", 10.3797, 78.8205),
    Region("Ramanathapuram", "ராமநாதபுரம்", 9.3639, 78.8395),
    Region("Ranipet", "ராணிப்பேட்டை", 12.9224, 79.3326),
    Region("Salem", "சேலம்", 11.6643, 78.1460),
    Region("Sivaganga", "சிவகங்கை", 9.8433, 78.4809),
    Region("Tenkasi", "தென்காசி", 8.9594, 77.3152),
    Region("Thanjavur", "தஞ்சாவூர்", 10.7870, 79.1378),
    Region("Theni", "தேனி", 10.0104, 77.4768),
    Region("Thoothukudi", "தூத்துக்குடி", 8.7642, 78.1348),
    Region("Tiruchirappalli", "திருச்சிராப்பள்ளி", 10.7905, 78.7047),
    Region("Tirunelveli", "திருநெல்வேலி", 8.7139, 77.7567),
    Region("Tirupathur", "திருப்பத்தூர்", 12.4961, 78.5730),
    Region("Tiruppur", "திருப்பூர்", 11.1085, 77.3411),
    Region("Tiruvallur", "திருவள்ளூர்", 13.1439, 79.9086),
    Region("Tiruvannamalai", "திருவண்ணாமலை", 12.2253, 79.0747),
    Region("Tiruvarur", "திருவாரூர்", 10.7661, 79.6344),
    Region("Vellore", "வேலூர்", 12.9165, 79.1325),
    Region("Viluppuram", "விழுப்புரம்", 11.9401, 79.4861),
    Region("Virudhunagar", "விருதுநகர்", 9.5680, 77.9624),
    Region("Puducherry", "புதுச்சேரி", 11.9416, 79.8083),
)

_BY_NAME: dict[str, Region] = {r.name: r for r in REGIONS}


def region_names() -> list[str]:
    """Region identifiers in display order."""
    return [r.name for r in REGIONS]


def find_region(name: str | None, default: str = DEFAULT_REGION_NAME) -> Region:
    """Return the region whose identifier equals name.

    Falls back to the region named by default, then to the first region, when
    there is no exact match.
    """
    if name and name in _BY_NAME:
        return _BY_NAME[name]
    return _BY_NAME.get(default, REGIONS[0])
