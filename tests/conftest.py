from __future__ import annotations

import pytest

from hikelog.data.store import HikeStore, RecordStore

# Ragged, hand-edited sheet: quoted commas, doubled quotes, a multi-line
# comment, a junk id, an empty location and an unparseable date.
SAMPLE_CSV = (
    "Num,Date,Comments,Link,Location,Miles,Elevation Gain\r\n"
    '1,1/5/20,"First hike, beautiful views",https://maps.example/1,"Mission Peak, Fremont",6,2100\r\n'
    '2,3/14/20,Rainy and windy,,Mission Peak,5.5,"2,000"\r\n'
    '25,7/4/21,"Long strenuous climb\nthen pancakes at the diner",,"Mount Dana, Yosemite",8,3100\r\n'
    "26,8/1/21,Easy stroll,,Lake Chabot,3,200\r\n"
    "abc,9/9/21,header junk,,Nowhere,1,1\r\n"
    "27,10/2/2021,Coffee after,,,4,900\r\n"
    '50,12/25/22,"He said ""wow"", stunning",,Sunol Peak,7.2,2400 ft\r\n'
    "51,bad date,Quick walk,,,2,\r\n"
)


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def snapshot() -> RecordStore:
    return RecordStore.from_text(SAMPLE_CSV)


@pytest.fixture
def hike_store() -> HikeStore:
    return HikeStore(source_url="https://sheet.example/pub?output=csv").load_text(SAMPLE_CSV)
