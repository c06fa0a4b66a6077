from pathlib import Path

import pytest

POSTS_CSV = """Platform,PostType,Date,Likes
Instagram,Image,3/1/2024 (Friday),1
Instagram,Video,3/1/2024 (Friday),2
Instagram,Image,3/2/2024 (Saturday),3
Instagram,Video,3/2/2024 (Saturday),4
Instagram,Image,3/3/2024 (Sunday),5
Instagram,Video,3/3/2024 (Sunday),6
Instagram,Image,3/4/2024 (Monday),7
Instagram,Video,3/4/2024 (Monday),8
Instagram,Image,3/5/2024 (Tuesday),9
Instagram,Video,3/5/2024 (Tuesday),10
Twitter,Image,3/1/2024 (Friday),4
Twitter,Video,3/2/2024 (Saturday),6
"""

AVG_CSV = """Platform,PostType,Likes
Instagram,Image,5
Instagram,Video,6
Twitter,Image,4
Twitter,Video,6
"""

TIME_CSV = """Date,Likes
3/1/2024 (Friday),2.33
3/2/2024 (Saturday),4.33
3/3/2024 (Sunday),5.5
3/4/2024 (Monday),7.5
3/5/2024 (Tuesday),9.5
"""


@pytest.fixture
def posts_only_dir(tmp_path) -> Path:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "socialMedia.csv").write_text(POSTS_CSV)
    return data_dir


@pytest.fixture
def data_dir(posts_only_dir) -> Path:
    (posts_only_dir / "socialMediaAvg.csv").write_text(AVG_CSV)
    (posts_only_dir / "socialMediaTime.csv").write_text(TIME_CSV)
    return posts_only_dir
