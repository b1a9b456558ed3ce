import pytest

SALES_CSV = """Date,Product,Category,Quantity,Amount,Customer_Age,Location
2024-08-01,Blue Kurta,Ethnic,2,1000,34,Mumbai
2024-08-02,Red Saree,Ethnic,1,2500,,Delhi
2024-08-03,Blue Kurta,Ethnic,1,500,28,Pune
"""

INVENTORY_CSV = """Product,Category,Stock,Price,Supplier,Min_Alert
Blue Kurta,Ethnic,2,500,Fashion_Co,5
Red Saree,Ethnic,10,2500,Style_Hub,5
Cotton Shirt,Western,3,800,,
Denim Jeans,Western,8,1200,Trend_Makers,10
"""

REVIEWS_CSV = """Date,Rating,Review,Product,Platform
2024-08-05,5,Great quality,Blue Kurta,Google
2024-08-06,1,Terrible service,Red Saree,Website
2024-08-07,4,,Cotton Shirt,Amazon
"""


def write_csv(directory, name, text):
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def input_dir(tmp_path):
    """An input folder holding one valid file per dataset, plus an older sales file."""
    folder = tmp_path / "input"
    folder.mkdir()
    write_csv(folder, "sales_2024-07-01.csv", "Date,Product,Quantity,Amount\n")
    write_csv(folder, "sales_2024-08-31.csv", SALES_CSV)
    write_csv(folder, "inventory_2024-08-31.csv", INVENTORY_CSV)
    write_csv(folder, "reviews_2024-08-31.csv", REVIEWS_CSV)
    return folder


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    from retail_insights import settings

    folder = tmp_path / "output"
    monkeypatch.setattr(settings, "OUTPUT_DIR", folder)
    monkeypatch.setattr(settings, "SAVE_JSON_OUTPUT", True)
    return folder
