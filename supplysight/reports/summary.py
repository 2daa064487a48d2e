"""Summary totals and fill rate for the dashboard cards"""


def fill_rate(total_stock, total_demand) -> float:
    """
    Percentage of demand covered by stock, capped at 100 and rounded to 0.1.

    Zero demand gives 0.0 whatever the stock.
    """
    if total_demand <= 0:
        return 0.0
    return round(min(total_stock, total_demand) / total_demand * 100, 1)


def format_percent(rate) -> str:
    return f"{rate:.1f}%"


def summarize(points):
    """
    Totals over anything with stock and demand attributes (KPI points or products).

    Returns:
        dict with 'total_stock', 'total_demand', 'fill_rate' and 'fill_rate_display'
    """
    total_stock = sum(p.stock for p in points)
    total_demand = sum(p.demand for p in points)
    rate = fill_rate(total_stock, total_demand)
    return {
        'total_stock': total_stock,
        'total_demand': total_demand,
        'fill_rate': rate,
        'fill_rate_display': format_percent(rate),
    }


def chart_series(points):
    """Label KPI points Day 1..N for the trend chart"""
    return [
        {'day': f"Day {index}", 'stock': p.stock, 'demand': p.demand}
        for index, p in enumerate(points, start=1)
    ]
