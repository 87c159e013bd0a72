"""Bundled sample dictionary text (opening chapter of a classical novel)."""

SAMPLE_DICTIONARY = (
    "第一回甄士隱夢幻識通靈賈雨村風塵懷閨秀作"
    "者自云因曾歷過番之後故將真事去而借說撰此"
    "石頭記書也曰但中所何又是哉今碌無成忽念及"
    "當日有女子細推了覺其行止見皆出於我上堂鬚"
    "眉不若彼裙釵實愧則餘悔益大可奈時欲已往賴"
    "天恩下承祖德錦衣紈絝飫甘饜美肥背父母教育"
    "負師兄規訓至半生潦倒罪編述以告普人固能免"
    "然閣本萬肖護短併使泯滅雖茆椽蓬牖瓦灶繩床"
    "晨月夕階柳庭花亦未傷襟筆墨學文爲用假語言"
    "敷演段來悅耳目乃題綱正義開卷即知意原友情"
    "並非怨世駡矣涉態得叙旨閱切詩浮着甚苦奔忙"
    "盛席華筵終散場悲喜千般同渺古盡荒唐謾紅袖"
    "啼痕重更痴抱恨長字看血十年辛尋常列位官你"
    "道從起根由近諳深趣味待在注明方聞惑媧氏煉"
    "補山稽崖高經二丈四頑三六五百零塊皇只單剩"
    "便棄青埂峰誰煅性眾俱獨己材堪入選遂嗟夜號"
    "慚悼俄僧遠骨骼凡豐神迥异笑坐邊談快論先些"
    "雲霧海僊玄到榮富貴聽打動心想要間享這粗蠢"
    "口吐向那弟物禮適耀繁慕質卻稍況仙形體定品"
    "必濟利如蒙發點慈攜帶溫柔鄉裡受幾永佩洪劫"
    "忘畢齊憨善樂依恃足好多魔八個緊相連屬瞬息"
    "极換究竟境歸空的熾進話复求再強制歎靜極思"
    "數既們莫并奇處踮腳罷施佛法助還案否感謝咒"
    "符展術登變鮮瑩洁玉且縮扇墜小拿托掌体寶沒"
    "須鐫妙昌隆邦簪纓族地安身業禁問件携望乞示"
    "白飄投舍訪跡分就茫離合歡炎涼面首偈與蒼枉"
    "許係前倩寄傳落胎親陳家瑣閒詞全備或适解悶"
    "朝代紀輿國反失考据寫賢忠理廷治俗政樣才微"
    "班姑蔡縱抄恐愛呢答太耶漢等添綴難野史蹈轍"
    "套新別致取拘市井少特訕謗君貶妻奸淫凶惡胜"
    "种穢污臭屠毒坏佳部共濫滿紙潘建西兩艷賦擬"
    "男名姓旁撥亂劇丑鬟婢乎逐悉矛盾睹敢似委消"
    "愁破歪熟噴飯供酒興衰際遇追蹤躡加穿鑿徒為"
    "貧食累怀貪戀色貨工夫願稱檢讀他醉飽臥避把"
    "玩豈省壽命筋力比謀虛妄舌害腿令眼胡牽扯淑"
    "娘舊稿忖晌遍指責佞誅邪罵仁臣良孝倫關功頌"
    "眷窮錄邀約私訂偷盟毫干尾悟易改吳樓東魯孔"
    "梅溪鑒曹雪芹軒披載增刪次纂章金陵絕酸淚都"
    "脂硯齋甲戌評仍按陷南隅蘇城閶門最流外里街"
    "內清巷廟窄狹呼葫蘆住宦費嫡封稟恬淡每觀修"
    "竹酌吟膝兒乳喚英蓮歲夏晝房手倦拋伏几憩朦"
    "朧睡辨廂放現公該結冤尚趁機會夾孽造罕河岸"
    "畔絳珠草株赤瑕宮瑛侍露灌溉始久延精滋養脫"
    "木僅游饑蜜果膳渴飲水湯酬報郁纏綿恰偶乘平"
    "緣警挂償惠勾陪碎膩概篇總香竊暗泄鬼愚度吾"
    "交割楚完猶集隨系請濁洞洗諦沉預跳火坑遞接"
    "奪牌坊幅對聯跟舉步聲霹靂崩叫睛烈芭蕉冉奶"
    "走越粉妝琢乖伸鬥耍熱鬧癩跣跛瘋癲揮霍哭主"
    "運爹睬耐煩撤句慣嬌菱澌防節元宵煙豫各幹營"
    "北邙銷影試晚隔壁居儒化表飛州仕末宗基喪京"
    "整淹蹇暫賣老倚佇引聊送童獻茶嚴爺拜慌恕誑"
    "駕略讓客候妨廳翻弄籍窗嗽丫擷儀容姿呆猛抬"
    "敝巾服窘腰圓厚闊兼劍星直鼻權腮轉雄壯襤褸"
    "什麼幫周疑怪困狂巨留早秋宴另具顧刻值占律"
    "卜頻斂額儔蟾光逢搔匵价奩淺誕謂團尊旅寂寥"
    "納辭拂院臾設杯盤肴款斟漫漸濃觥限斝簫管戶"
    "弦歌輪彩凝輝愈豪乾七寓晴欄捧仰騰兆履霓賀"
    "斗充沽囊路措突宜速春闈戰置謬銀冬九黃期買"
    "舟晤收介吃竿醒昨荐謁和鼓達黑陰倏霄啟社燈"
    "檻急逃婦妥找音響旦死病孺构疾醫療炸油鍋逸"
    "燒篱抵條焰軍民救勢熄怜片礫惟跌商議田庄偏"
    "旱鼠盜蜂搶狗兵剿捕折岳肅貫務農殷婿狼狽幸"
    "薄計哄賺朽屋稼穡勉支持活懶驚唬忿痛積暮攻"
    "景巧拄拐杖掙挫麻屣鶉曉冢堆聚閉孫順迎算宿"
    "慧徹陋室笏枯楊舞蛛絲雕梁綠紗糊鬢霜土隴帳"
    "底鴛鴦箱丐嘆保擇膏粱嫌帽鎖枷扛憐襖寒紫蟒"
    "唱認嫁裳拍肩褡褳烘信遣討靠僕針線喝任牢轎"
    "烏猩袍府怔象丟歇嚷差瞪禍"
)

__all__ = ["SAMPLE_DICTIONARY"]
