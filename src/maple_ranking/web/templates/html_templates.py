"""
HTML templates for the Maple ranking dashboard.
"""

def get_main_html_template() -> str:
    """Return the main HTML template for the web UI."""
    return """<!DOCTYPE html>
<html lang="ja">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>経験値ランキング</title>
    <link rel="stylesheet" href="styles.css">
    <script src="https://cdn.jsdelivr.net/npm/chart.js"></script>
</head>
<body>
    <div class="app">
        <div class="main-container">
            <header class="app-header">
                <h1>経験値ランキング</h1>
                <div class="data-stats">
                    <span>プレイヤー数: <span id="statPlayers">0</span>人</span>
                    <span>期間: <span id="statStart"></span> ~ <span id="statEnd"></span></span>
                    <span>レベル範囲: Lv.<span id="statMinLevel">0</span> - <span id="statMaxLevel">0</span></span>
                </div>
                <p class="last-updated">Last updated: <span id="lastUpdated"></span></p>
                <div class="info-section">
                    <ul>
                        <li>データ更新は毎日0:00~1:00の間に行われます。</li>
                        <li>総合ランキングの1~100位のデータを取得しています。</li>
                        <li>100位以内に入ってランク外になった場合でもリストに乗っています。</li>
                        <li><a href="https://maplestory.nexon.co.jp/community/exp/ranking/" target="_blank" rel="noopener noreferrer">公式ランキング</a></li>
                    </ul>
                </div>
            </header>

            <div class="controls-section">
                <div class="filter-panel">
                    <h3>キャラクター検索</h3>
                    <div class="filter-grid">
                        <div class="filter-group">
                            <label for="nameInput">プレイヤー名</label>
                            <input type="text" id="nameInput" list="nameOptions" placeholder="プレイヤー名で検索">
                            <datalist id="nameOptions"></datalist>
                        </div>
                        <div class="filter-group">
                            <button class="clear-button" id="clearButton">検索をクリア</button>
                        </div>
                    </div>
                </div>
                <div class="source-selector">
                    <div class="source-buttons" id="sourceButtons"></div>
                </div>
            </div>
        </div>

        <div class="error" id="errorMessage" style="display: none;"></div>

        <div class="ranking-chart-container" id="playerChartContainer" style="display: none;">
            <h3 id="playerChartTitle"></h3>
            <div class="no-data" id="playerNoData" style="display: none;">このキャラクターのデータが見つかりませんでした。</div>
            <div class="chart-wrapper"><canvas id="playerChart"></canvas></div>
            <div class="chart-info" id="playerChartInfo"></div>
        </div>

        <div class="weekly-chart-container" id="weeklyChartContainer">
            <h3>週間ランキング推移（トップ<span id="weeklyTopN">10</span>）</h3>
            <div class="weekly-chart-wrapper"><canvas id="weeklyChart"></canvas></div>
            <div class="weekly-chart-info"><p>直近<span id="weeklyWindow">7</span>日間のトップ<span id="weeklyTopNInfo">10</span>プレイヤーの順位推移</p></div>
        </div>

        <div class="distribution-grid">
            <div class="distribution-card"><h3>レベル分布</h3><canvas id="levelChart"></canvas></div>
            <div class="distribution-card"><h3>サーバー分布</h3><canvas id="worldChart"></canvas></div>
            <div class="distribution-card wide"><h3>職業分布</h3><canvas id="jobChart"></canvas></div>
        </div>

        <div class="ranking-table-container">
            <table class="ranking-table">
                <thead>
                    <tr>
                        <th>Rank</th>
                        <th>Name</th>
                        <th>World</th>
                        <th>Level</th>
                        <th>Job</th>
                        <th>Last Updated</th>
                    </tr>
                </thead>
                <tbody id="rankingBody"></tbody>
            </table>
            <div class="no-results" id="noResults" style="display: none;">フィルター条件に一致するプレイヤーが見つかりませんでした。</div>
        </div>
    </div>
    <script src="script.js"></script>
</body>
</html>"""
