from __future__ import annotations

from pathlib import Path

import pandas as pd

from supplementary_figures.navigation import NavigationController
from supplementary_figures.rng import make_rng
from supplementary_figures._util import safe_filename


def main(out_dir: str = "test_data/figures", seed: int = 42) -> None:
    """
    Dump the dataset behind every figure to CSV for inspection.

    Walks the gallery with a seeded controller so two runs with the same seed
    write identical files.
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    nav = NavigationController(rng=make_rng(seed))
    view = nav.jump_to(1)

    index_rows = []
    while True:
        d = view.descriptor
        fname = safe_filename(f"figure_s{d.figure_id:02d}") + ".csv"
        view.dataset.to_csv(out / fname, index=False)
        index_rows.append(
            {
                "figure": d.figure_id,
                "title": d.title,
                "file": fname,
                "records": len(view.dataset),
                "columns": ";".join(view.dataset.columns),
            }
        )
        if nav.at_last:
            break
        view = nav.next()

    index = pd.DataFrame(index_rows)
    index.to_csv(out / "index.csv", index=False)
    print(f"Wrote {len(index):,} figure datasets to {out.resolve()}")


if __name__ == "__main__":
    main()
