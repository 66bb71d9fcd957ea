"""
Constant Literals — канонические строковые значения встроенных констант

Чистые данные: полные десятичные разложения констант, используемых
трансцендентными алгоритмами и делением (ln 10, 1/ln 10, seeds для
Newton-деления), а также короткие коэффициенты полинома для cube root.

Литералы задаются авторами библиотеки и никогда не приходят от пользователя.
"""

from typing import Final

# ln(10)
STR_LN10: Final[str] = (
    "2.30258509299404568401799145468436420760110148862877297603332790096757260967"
    "7352480235997205089598298341967784042286248633409525465082806756666287369098"
    "7816894829072083255546808437998948262331985283935053089653777326288461633662"
    "2228769821988674654366747440424327436515504893431493939147961940440022210510"
    "1714174800368808401264708068556774321622835522011480466371565912137345074785"
    "6947683463616792101806445070648000277502684916746550586856935673420670581136"
    "4292245544057589257242082413146956890167589402567763113569192920333765871416"
    "6023010570308963457207544037084746994016826928280848118428931484852494864487"
    "1927809676271275775397027668605952496716674183485704422507197965004714951050"
    "4922147765676369386629769795221107182645497347726624257094293225827985025855"
    "0978526538320760672631716430950599508780752371033310119785754733154142180842"
    "7543863591778117054309827482385045648019095610299291824318237525357709750539"
    "5651876975103749708886921802051893395072385392051446341972652872869651108625"
    "7149219884997874887377134568620916705849807828059751193854445009978131146915"
    "9346662410718466923101075984383191912922307925037472986509290098803919417026"
    "5441681633572755570315159611356484654619089704281976336583698371632898217440"
    "7366009162177850541779276367731145041782137660111010731042397832521894898817"
    "5979217986663943195239368559164471182467532456309125287783309636042629821530"
    "4087456092776072664135478757661626292656829870495795491395491804920906943858"
    "0790032763017941503117866862092408537949861264933479354871737451675809537088"
    "2810674524401058924449764796860751202757241818749893959716431055188481952883"
    "3074669931781463493000032120032776565413047262188397059679445794346834321839"
    "5304414844803701305753674262153675579814770458031413637793236291560128185336"
    "4984669422614652064599420729171193706024449293580370077189810973625332245483"
    "6698850552828596619280509844717519850366668087497049698227322024482334309716"
    "9111136813588418696549323714996941979687803008850408979618598756579894836445"
    "2120436982164152929878117429733325886079159125109671875109292484750239305726"
    "6544627620092306879151813580347770129559364629841236649702335517458619556477"
    "2461857717369368404676577047874319780573853271810933883496338813069945569399"
    "3461010907456160333122479493604553618491233330637047517248712763791409243983"
    "3181016473782337969226563768207170693584639453161694941170184193811940541644"
    "9466111274712819705817783293841742231409930022911502362192186723337268385688"
    "2735333719251034129307056325444266114297653883018223840910261985828884335874"
    "5596045300454837078905257847316628370195339223104752756499811922874278971371"
    "5713228319641003422124210082180679525276689858180956119208391760721080919923"
    "4615169525990994737827806481280587927319938934534153201859697110214075422827"
    "9629823706894176474064222575721245539252617937365243444056059533659153916031"
    "2524480149313234572453879524389036839236450507881731359711238145323701508413"
    "4911223243909276817247496079557991513639828810582857405380006533716555530141"
    "963322419180876210182049194926514838926922937079")


# 1/ln(10)
STR_INV_LN10: Final[str] = (
    "0.43429448190325182765112891891660508229439700580366656611445378316586464920"
    "8870774729224949338431748318706106744766303733641679287158963906569221064662"
    "8122658521270865686703295933708696588266883311636077384905142844348666768646"
    "5860851355614821234876534354343573172538356222813956030486466523660955393773"
    "5617632343191671099141159789496299351245793492635765546907767108241915047991"
    "0989674900103277537653570270087328550951731440674697951899513594088040423931"
    "5188681084025446540897970298632868287626241440134570435461329206007126051040"
    "2836712595484628770786199899232674843990234817153593455107947549255248257782"
    "0679220140931468164467381030560475635720408883383209488996522717494541331791"
    "4176402474075057887678609710992575477300460486560495156100579857413402726752"
    "0143924791797085904793128521249334119732987722646388535022608388162631646388"
    "3553685501768460295286399391633510647555704050513182342988874882120643595023"
    "8189026433177115373822033626344164783971460018583960930063173339861340351357"
    "4178714497145307649296833139239981060850573481616980928001619952352311723767"
    "6561989228127013815804248715978344927215947562057179993483814031940166771520"
    "1047871975825316179514903755975142465707366464397568631493251624987279948526"
    "3744879116595921970172066270455928465703646263567573357573936967399457090960"
    "2526350957193468839951236811356428010958778313759442713049980643798750414472"
    "0959748726740601606501053752870004911678671333091547614410050547759308907678"
    "8559653343219076312835357030485402097994161401080791060749887175249584146130"
    "3867532086001324486392545573072842386175970677989354844570318359336523016027"
    "9716265357265144285198660637686353381819548763891613436523747594656639213807"
    "3614450368379787682436902880449364049675187172061413073180441718021644099320"
    "0651069696951247072666224570004229341407923361685302418860272411867806272570"
    "3375525628707676966321736724547581333392638401303200385988999473322857034941"
    "9583769147209060881244782507873671157303393156562515790709324537045074432662"
    "3349807143038059581776957944070042202545430531910888982754062263600601879152"
    "2674777882320960252287667624163322968124645025772950402266236275363117985321"
    "5378088327232692078598099075743443736724871035585330654658165353515794399007"
    "0326436222520010336980419843015524524173190520247212241110927324425302930200"
    "8710373375048674986891172256720672682752465787904467352685757940599833465958"
    "7859262497872538018550638960237530429453996373736743468076751524998629767673"
    "2404903363175488195323680087668648666069282082342536311304939972702858872849"
    "0862584586870455692445485386072024973966311263721224975388549679815802848104"
    "9472414045334119267424083967306116723425684312962466624625954276067718285896"
    "3306586513950932049023032806357536242804315480658368852257832901530787483141"
    "9859290741214153447721653982148476192884065713454387986078951994350115328264"
    "5774231126681718328496869789090432442100527223347505314162598164645704453890"
    "1148313760708445483457955728303866473638468537587172210685993933008378534367"
    "552699899185150879055911525282664")


# 48/17 — seed для reciprocal-деления методом Ньютона
STR_48_DIV_17: Final[str] = (
    "2.82352941176470588235294117647058823529411764705882352941176470588235294117"
    "6470588235294117647058823529411764705882352941176470588235294117647058823529"
    "4117647058823529411764705882352941176470588235294117647058823529411764705882"
    "3529411764705882352941176470588235294117647058823529411764705882352941176470"
    "5882352941176470588235294117647058823529411764705882352941176470588235294117"
    "6470588235294117647058823529411764705882352941176470588235294117647058823529"
    "4117647058823529411764705882352941176470588235294117647058823529411764705882"
    "3529411764705882352941176470588235294117647058823529411764705882352941176470"
    "5882352941176470588235294117647058823529411764705882352941176470588235294117"
    "6470588235294117647058823529411764705882352941176470588235294117647058823529"
    "4117647058823529411764705882352941176470588235294117647058823529411764705882"
    "3529411764705882352941176470588235294117647058823529411764705882352941176470"
    "5882352941176470588235294117647058823529411764705882352941176470588235294117"
    "6470588235294117647058823529411764705882352941176470588235294117647058823529"
    "4117647058823529411764705882352941176470588235294117647058823529411764705882"
    "3529411764705882352941176470588235294117647058823529411764705882352941176470"
    "5882352941176470588235294117647058823529411764705882352941176470588235294117"
    "6470588235294117647058823529411764705882352941176470588235294117647058823529"
    "4117647058823529411764705882352941176470588235294117647058823529411764705882"
    "3529411764705882352941176470588235294117647058823529411764705882352941176470"
    "5882352941176470588235294117647058823529411764705882352941176470588235294117"
    "6470588235294117647058823529411764705882352941176470588235294117647058823529"
    "4117647058823529411764705882352941176470588235294117647058823529411764705882"
    "3529411764705882352941176470588235294117647058823529411764705882352941176470"
    "5882352941176470588235294117647058823529411764705882352941176470588235294117"
    "6470588235294117647058823529411764705882352941176470588235294117647058823529"
    "4117647058823529411764706")


# 32/17 — seed для reciprocal-деления методом Ньютона
STR_32_DIV_17: Final[str] = (
    "1.88235294117647058823529411764705882352941176470588235294117647058823529411"
    "7647058823529411764705882352941176470588235294117647058823529411764705882352"
    "9411764705882352941176470588235294117647058823529411764705882352941176470588"
    "2352941176470588235294117647058823529411764705882352941176470588235294117647"
    "0588235294117647058823529411764705882352941176470588235294117647058823529411"
    "7647058823529411764705882352941176470588235294117647058823529411764705882352"
    "9411764705882352941176470588235294117647058823529411764705882352941176470588"
    "2352941176470588235294117647058823529411764705882352941176470588235294117647"
    "0588235294117647058823529411764705882352941176470588235294117647058823529411"
    "7647058823529411764705882352941176470588235294117647058823529411764705882352"
    "9411764705882352941176470588235294117647058823529411764705882352941176470588"
    "2352941176470588235294117647058823529411764705882352941176470588235294117647"
    "0588235294117647058823529411764705882352941176470588235294117647058823529411"
    "7647058823529411764705882352941176470588235294117647058823529411764705882352"
    "9411764705882352941176470588235294117647058823529411764705882352941176470588"
    "2352941176470588235294117647058823529411764705882352941176470588235294117647"
    "0588235294117647058823529411764705882352941176470588235294117647058823529411"
    "7647058823529411764705882352941176470588235294117647058823529411764705882352"
    "9411764705882352941176470588235294117647058823529411764705882352941176470588"
    "2352941176470588235294117647058823529411764705882352941176470588235294117647"
    "0588235294117647058823529411764705882352941176470588235294117647058823529411"
    "7647058823529411764705882352941176470588235294117647058823529411764705882352"
    "9411764705882352941176470588235294117647058823529411764705882352941176470588"
    "2352941176470588235294117647058823529411764705882352941176470588235294117647"
    "0588235294117647058823529411764705882352941176470588235294117647058823529411"
    "7647058823529411764705882352941176470588235294117647058823529411764705882352"
    "9411764705882352941176471")


# Cube root: квадратичный полином, аппроксимирующий cbrt(x) на 0.125 <= x <= 1.
# Стартовая точка итерационного уточнения. Коэффициенты:
# https://people.freebsd.org/~lstewart/references/apple_tr_kt32_cuberoot.pdf
STR_CBRT_C1: Final[str] = "-0.46946116"
STR_CBRT_C2: Final[str] = "1.072302"
STR_CBRT_C3: Final[str] = "0.3812513"
