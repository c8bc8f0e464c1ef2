"""
Write a random catalog CSV for trying the browser without real data.

    python scripts/mock_catalog_csv.py [out_path] [n_families]
"""
import sys
from pathlib import Path

import numpy as np
import pandas as pd

DOMAINS = ["Supply Chain", "Logistics", "Customer", "Finance", "Product", "Other"]
BRANDS = ["AFI", "ADG", "RH"]
MEASURES = ["Quality", "Accessibility", "Timeliness", "Completeness"]
USECASES = ["1.1 Demand forecasting", "1.2 Replenishment", "2.1 Slotting", "2.2.1 Route planning", "3.1 Churn prevention"]

out_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("config/data/mock.csv")
n_families = int(sys.argv[2]) if len(sys.argv) > 2 else 40

rng = np.random.default_rng()

df = pd.DataFrame(
    {
        "Data Domain": rng.choice(DOMAINS, size=n_families),
        "Data Family": [f"Family {i:03d}" for i in range(n_families)],
    }
)
for brand in BRANDS:
    df[brand] = rng.random(n_families) > 0.4
for measure in MEASURES:
    scores = rng.integers(0, 101, size=n_families).astype(float)
    scores[rng.random(n_families) < 0.1] = np.nan  # some gaps
    df[measure] = scores

moat_flags = {}
for moat in ("1", "2", "3"):
    moat_flags[moat] = rng.random(n_families) > 0.6
    df[f"MOAT {moat}"] = np.where(moat_flags[moat], "x", "")
for usecase in USECASES:
    moat = usecase.split(".", 1)[0]
    df[usecase] = np.where(moat_flags[moat] & (rng.random(n_families) > 0.5), "x", "")

out_path.parent.mkdir(parents=True, exist_ok=True)
df.to_csv(out_path, index=False)
print("wrote", out_path, df.shape)
