"""
CSS styles for the Maple ranking dashboard.
"""

def get_css_content() -> str:
    """Return the complete CSS styles for the web UI."""
    return """:root {
    --bg-gradient: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
    --main-bg: #f8f9fa;
    --text-color: #333333;
    --text-color-secondary: #6b7280;
    --card-bg: #ffffff;
    --border-color: #e1e5e9;
    --accent: #667eea;
    --shadow: 0 10px 30px rgba(0,0,0,0.2);
}

* {
    margin: 0;
    padding: 0;
    box-sizing: border-box;
}

body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Hiragino Sans', 'Meiryo', sans-serif;
    background: var(--bg-gradient);
    color: var(--text-color);
    min-height: 100vh;
}

.app {
    max-width: 1200px;
    margin: 0 auto;
    padding: 20px;
}

.main-container,
.ranking-chart-container,
.weekly-chart-container,
.distribution-card,
.ranking-table-container {
    background: var(--card-bg);
    border-radius: 12px;
    box-shadow: var(--shadow);
    padding: 20px;
    margin-bottom: 20px;
}

.app-header h1 {
    margin-bottom: 10px;
}

.data-stats {
    display: flex;
    flex-wrap: wrap;
    gap: 20px;
    font-weight: 600;
}

.last-updated,
.info-section {
    color: var(--text-color-secondary);
    font-size: 0.9em;
    margin-top: 10px;
}

.info-section ul {
    padding-left: 20px;
}

.controls-section {
    display: flex;
    flex-wrap: wrap;
    justify-content: space-between;
    gap: 20px;
    margin-top: 20px;
}

.filter-grid {
    display: flex;
    gap: 10px;
    align-items: flex-end;
}

.filter-group {
    display: flex;
    flex-direction: column;
    gap: 4px;
}

.filter-group input {
    padding: 8px 12px;
    border: 1px solid var(--border-color);
    border-radius: 6px;
    min-width: 240px;
}

.clear-button,
.source-button,
.name-button {
    cursor: pointer;
    border: none;
    border-radius: 6px;
    padding: 8px 14px;
}

.clear-button {
    background: var(--border-color);
}

.source-button {
    background: var(--main-bg);
    margin-left: 6px;
}

.source-button.active {
    background: var(--accent);
    color: #ffffff;
}

.name-button {
    background: none;
    color: var(--accent);
    padding: 0;
    font-weight: 600;
}

.chart-wrapper,
.weekly-chart-wrapper {
    position: relative;
    height: 400px;
}

.chart-info,
.weekly-chart-info {
    display: flex;
    flex-wrap: wrap;
    gap: 16px;
    margin-top: 12px;
    color: var(--text-color-secondary);
}

.distribution-grid {
    display: grid;
    grid-template-columns: 1fr 1fr;
    gap: 20px;
}

.distribution-card.wide {
    grid-column: span 2;
}

.ranking-table {
    width: 100%;
    border-collapse: collapse;
}

.ranking-table th,
.ranking-table td {
    padding: 10px;
    border-bottom: 1px solid var(--border-color);
    text-align: left;
}

.rank.top-rank {
    color: #f59e0b;
    font-weight: 700;
}

.timestamp-cell {
    color: var(--text-color-secondary);
    font-size: 0.85em;
}

.no-data,
.no-results,
.error {
    padding: 20px;
    text-align: center;
    color: var(--text-color-secondary);
}

.error {
    background: var(--card-bg);
    border-radius: 12px;
    color: #ef4444;
    margin-bottom: 20px;
}

@media (max-width: 768px) {
    .distribution-grid {
        grid-template-columns: 1fr;
    }

    .distribution-card.wide {
        grid-column: span 1;
    }
}
"""
