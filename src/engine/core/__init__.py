"""
どこで: `engine.core` サブパッケージ。
何を: 座標計算の中核（Box 演算・単位換算・補間・ページ寸法・Geometry と変換）。
なぜ: ホスト文書に触れない純粋な計算層を分離し、上位層（shapes/api）から再利用可能にするため。
"""
